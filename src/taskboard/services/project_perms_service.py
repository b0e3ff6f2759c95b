# services/project_perms_service.py
from fastapi import status
from loguru import logger

from taskboard.exceptions import ApiError
from taskboard.models.api_response import ApiResponse
from taskboard.models.member import MembersData, PermissionsIdData
from taskboard.models.permissions import ObjectType, Permission
from taskboard.models.project import Project
from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.repositories.user_repository import UserRepository
from taskboard.services.base import fetch, handle_api_errors, persist, require, validate_permission


class ProjectPermsService:
    """
    Membership of a project. A grant on the project is what makes a user a
    member; board grants inside the project hang off it.
    """

    def __init__(self, perms_repository: ObjectPermsRepository, project_repository: ProjectRepository,
                 board_repository: BoardRepository, user_repository: UserRepository):
        self.perms_repository = perms_repository
        self.project_repository = project_repository
        self.board_repository = board_repository
        self.user_repository = user_repository

    def _grant(self, project_id: int, user_id: int, what: str = "Project permissions") -> Permission:
        return fetch(lambda: self.perms_repository.get(project_id, user_id, ObjectType.PROJECT), what)

    def _project(self, project_id: int) -> Project:
        return fetch(lambda: self.project_repository.get_by_id(project_id), "Project")

    def _project_default(self, project_id: int) -> Permission:
        default = self._project(project_id).default_permissions
        if default is None:
            logger.error(f"Project {project_id} has no default permissions")
            raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Project has no default permissions")
        return default

    @handle_api_errors
    def get_members(self, user_id: int, project_id: int) -> ApiResponse:
        require(self._grant(project_id, user_id), "read", "No read access to this project")
        project = self._project(project_id)
        members = fetch(lambda: self.perms_repository.get_members(project_id, ObjectType.PROJECT), "Members")
        for member in members:
            member.is_owner = member.user_id == project.owner_id
        return ApiResponse.ok(MembersData(members=members))

    @handle_api_errors
    def create(self, user_id: int, project_id: int, nickname: str, permission: Permission) -> ApiResponse:
        validate_permission(permission)
        if permission.is_empty():
            permission = self._project_default(project_id)

        caller = self._grant(project_id, user_id)
        require(caller, "admin", "Only project admins can add members")

        member = fetch(lambda: self.user_repository.get_by_nickname(nickname), "User")
        permissions_id = persist(
            lambda: self.perms_repository.create(project_id, member.id, ObjectType.PROJECT, permission),
            "Project member",
        )
        logger.info(f"User {member.id} added to project {project_id} by {user_id}")
        return ApiResponse.ok(PermissionsIdData(permissions_id=permissions_id))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, member_id: int, permission: Permission) -> ApiResponse:
        validate_permission(permission)

        caller = self._grant(project_id, user_id)
        require(caller, "admin", "Only project admins can change member permissions")
        self._grant(project_id, member_id, "Project member")

        project = self._project(project_id)
        if member_id == project.owner_id:
            raise ApiError(status.HTTP_403_FORBIDDEN, "Permissions of the project owner cannot be changed")
        if permission.is_empty():
            permission = self._project_default(project_id)

        persist(
            lambda: self.perms_repository.update(project_id, member_id, ObjectType.PROJECT, permission),
            "Project member",
        )
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int, member_id: int) -> ApiResponse:
        caller = self._grant(project_id, user_id)
        if member_id != user_id:
            require(caller, "admin", "Only project admins can remove members")
        self._grant(project_id, member_id, "Project member")

        project = self._project(project_id)
        if member_id == project.owner_id:
            raise ApiError(status.HTTP_403_FORBIDDEN, "The project owner cannot be removed")

        board_ids = fetch(lambda: self.board_repository.get_ids_by_project(project_id), "Boards")
        persist(
            lambda: self.perms_repository.delete_project_member(project_id, member_id, board_ids),
            "Project member",
        )
        logger.info(f"User {member_id} removed from project {project_id} by {user_id}")
        return ApiResponse.ok()
