# routers/board_perms_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.permissions import Permission
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects/{project_id}/boards/{board_id}/permissions", tags=["Board Permissions"])


@router.get("")
def get_board_members(project_id: int, board_id: int, user_id: int = Depends(get_current_user_id),
                      service: Service = Depends(get_service)):
    return send(service.board_perms.get_members(user_id, project_id, board_id))


@router.post("/{member_id}")
def add_board_member(project_id: int, board_id: int, member_id: int, permission: Permission,
                     user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.board_perms.create(user_id, project_id, board_id, member_id, permission))


@router.put("/{member_id}")
def update_board_member(project_id: int, board_id: int, member_id: int, permission: Permission,
                        user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.board_perms.update(user_id, project_id, board_id, member_id, permission))


@router.delete("/{member_id}")
def remove_board_member(project_id: int, board_id: int, member_id: int,
                        user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.board_perms.delete(user_id, project_id, board_id, member_id))
