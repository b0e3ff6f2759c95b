# routers/project_perms_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.permissions import Permission
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects/{project_id}/permissions", tags=["Project Permissions"])


@router.get("")
def get_project_members(project_id: int, user_id: int = Depends(get_current_user_id),
                        service: Service = Depends(get_service)):
    return send(service.project_perms.get_members(user_id, project_id))


@router.post("/{nickname}")
def add_project_member(project_id: int, nickname: str, permission: Permission,
                       user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.project_perms.create(user_id, project_id, nickname, permission))


@router.put("/{member_id}")
def update_project_member(project_id: int, member_id: int, permission: Permission,
                          user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.project_perms.update(user_id, project_id, member_id, permission))


@router.delete("/{member_id}")
def remove_project_member(project_id: int, member_id: int, user_id: int = Depends(get_current_user_id),
                          service: Service = Depends(get_service)):
    return send(service.project_perms.delete(user_id, project_id, member_id))
