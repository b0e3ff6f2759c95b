# services/project_service.py
from loguru import logger

from taskboard.models.api_response import ApiResponse
from taskboard.models.permissions import ObjectType, Permission
from taskboard.models.project import (
    ProjectCreate,
    ProjectData,
    ProjectIdData,
    ProjectRead,
    ProjectsData,
    ProjectUpdate,
)
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.services.base import fetch, handle_api_errors, persist, require, validate_permission


class ProjectService:
    def __init__(self, project_repository: ProjectRepository, perms_repository: ObjectPermsRepository):
        self.project_repository = project_repository
        self.perms_repository = perms_repository

    def _caller_permission(self, user_id: int, project_id: int) -> Permission:
        return fetch(
            lambda: self.perms_repository.get(project_id, user_id, ObjectType.PROJECT),
            "Project",
        )

    @handle_api_errors
    def create(self, user_id: int, project: ProjectCreate) -> ApiResponse:
        if project.default_permissions is not None:
            validate_permission(project.default_permissions)
        project_id = persist(lambda: self.project_repository.create(user_id, project), "Project")
        logger.info(f"User {user_id} created project {project_id}")
        return ApiResponse.ok(ProjectIdData(project_id=project_id))

    @handle_api_errors
    def get_all(self, user_id: int) -> ApiResponse:
        projects = fetch(lambda: self.project_repository.get_all(user_id), "Projects")
        return ApiResponse.ok(ProjectsData(projects=[ProjectRead.from_model(p) for p in projects]))

    @handle_api_errors
    def get_by_id(self, user_id: int, project_id: int) -> ApiResponse:
        permission = self._caller_permission(user_id, project_id)
        require(permission, "read", "No read access to this project")
        project = fetch(lambda: self.project_repository.get_by_id(project_id), "Project")
        return ApiResponse.ok(ProjectData(project=ProjectRead.from_model(project)))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, project: ProjectUpdate) -> ApiResponse:
        if project.default_permissions is not None:
            validate_permission(project.default_permissions)

        permission = self._caller_permission(user_id, project_id)
        require(permission, "write", "No write access to this project")
        if project.default_permissions is not None:
            require(permission, "admin", "Only project admins can change default permissions")

        persist(lambda: self.project_repository.update(project_id, project), "Project")
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int) -> ApiResponse:
        permission = self._caller_permission(user_id, project_id)
        require(permission, "admin", "Only project admins can delete the project")

        persist(lambda: self.project_repository.delete(project_id), "Project")
        logger.info(f"User {user_id} deleted project {project_id}")
        return ApiResponse.ok()
