# routers/task_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.task import TaskCreate, TaskUpdate
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects/{project_id}/boards/{board_id}/lists/{list_id}/tasks", tags=["Tasks"])


@router.post("")
def create_task(project_id: int, board_id: int, list_id: int, task: TaskCreate,
                user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.task.create(user_id, project_id, board_id, list_id, task))


@router.get("")
def get_all_tasks(project_id: int, board_id: int, list_id: int, user_id: int = Depends(get_current_user_id),
                  service: Service = Depends(get_service)):
    return send(service.task.get_all(user_id, project_id, board_id, list_id))


@router.get("/{task_id}")
def get_task(project_id: int, board_id: int, list_id: int, task_id: int,
             user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.task.get_by_id(user_id, project_id, board_id, list_id, task_id))


@router.put("/{task_id}")
def update_task(project_id: int, board_id: int, list_id: int, task_id: int, task: TaskUpdate,
                user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.task.update(user_id, project_id, board_id, list_id, task_id, task))


@router.delete("/{task_id}")
def delete_task(project_id: int, board_id: int, list_id: int, task_id: int,
                user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.task.delete(user_id, project_id, board_id, list_id, task_id))


@router.get("/{task_id}/labels", tags=["Labels"])
def get_task_labels(project_id: int, board_id: int, list_id: int, task_id: int,
                    user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.label.get_task_labels(user_id, project_id, board_id, list_id, task_id))


@router.post("/{task_id}/labels/{label_id}", tags=["Labels"])
def add_task_label(project_id: int, board_id: int, list_id: int, task_id: int, label_id: int,
                   user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.label.add_task_label(user_id, project_id, board_id, list_id, task_id, label_id))


@router.delete("/{task_id}/labels/{label_id}", tags=["Labels"])
def remove_task_label(project_id: int, board_id: int, list_id: int, task_id: int, label_id: int,
                      user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.label.remove_task_label(user_id, project_id, board_id, list_id, task_id, label_id))
