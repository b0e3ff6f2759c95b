# routers/label_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.label import LabelCreate, LabelUpdate
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects/{project_id}/boards/{board_id}/labels", tags=["Labels"])


@router.post("")
def create_label(project_id: int, board_id: int, label: LabelCreate, user_id: int = Depends(get_current_user_id),
                 service: Service = Depends(get_service)):
    return send(service.label.create(user_id, project_id, board_id, label))


@router.get("")
def get_all_labels(project_id: int, board_id: int, user_id: int = Depends(get_current_user_id),
                   service: Service = Depends(get_service)):
    return send(service.label.get_all(user_id, project_id, board_id))


@router.get("/{label_id}")
def get_label(project_id: int, board_id: int, label_id: int, user_id: int = Depends(get_current_user_id),
              service: Service = Depends(get_service)):
    return send(service.label.get_by_id(user_id, project_id, board_id, label_id))


@router.put("/{label_id}")
def update_label(project_id: int, board_id: int, label_id: int, label: LabelUpdate,
                 user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.label.update(user_id, project_id, board_id, label_id, label))


@router.delete("/{label_id}")
def delete_label(project_id: int, board_id: int, label_id: int, user_id: int = Depends(get_current_user_id),
                 service: Service = Depends(get_service)):
    return send(service.label.delete(user_id, project_id, board_id, label_id))
