# routers/task_list_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.task_list import TaskListCreate, TaskListUpdate
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects/{project_id}/boards/{board_id}/lists", tags=["Lists"])


@router.post("")
def create_list(project_id: int, board_id: int, task_list: TaskListCreate,
                user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.task_list.create(user_id, project_id, board_id, task_list))


@router.get("")
def get_all_lists(project_id: int, board_id: int, user_id: int = Depends(get_current_user_id),
                  service: Service = Depends(get_service)):
    return send(service.task_list.get_all(user_id, project_id, board_id))


@router.get("/{list_id}")
def get_list(project_id: int, board_id: int, list_id: int, user_id: int = Depends(get_current_user_id),
             service: Service = Depends(get_service)):
    return send(service.task_list.get_by_id(user_id, project_id, board_id, list_id))


@router.put("/{list_id}")
def update_list(project_id: int, board_id: int, list_id: int, task_list: TaskListUpdate,
                user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.task_list.update(user_id, project_id, board_id, list_id, task_list))


@router.delete("/{list_id}")
def delete_list(project_id: int, board_id: int, list_id: int, user_id: int = Depends(get_current_user_id),
                service: Service = Depends(get_service)):
    return send(service.task_list.delete(user_id, project_id, board_id, list_id))
