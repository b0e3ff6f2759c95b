# routers/project_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.project import ProjectCreate, ProjectUpdate
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.post("")
def create_project(project: ProjectCreate, user_id: int = Depends(get_current_user_id),
                   service: Service = Depends(get_service)):
    return send(service.project.create(user_id, project))


@router.get("")
def get_all_projects(user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.project.get_all(user_id))


@router.get("/{project_id}")
def get_project(project_id: int, user_id: int = Depends(get_current_user_id),
                service: Service = Depends(get_service)):
    return send(service.project.get_by_id(user_id, project_id))


@router.put("/{project_id}")
def update_project(project_id: int, project: ProjectUpdate, user_id: int = Depends(get_current_user_id),
                   service: Service = Depends(get_service)):
    return send(service.project.update(user_id, project_id, project))


@router.delete("/{project_id}")
def delete_project(project_id: int, user_id: int = Depends(get_current_user_id),
                   service: Service = Depends(get_service)):
    return send(service.project.delete(user_id, project_id))
