# services/board_perms_service.py
from fastapi import status
from loguru import logger

from taskboard.exceptions import ApiError
from taskboard.models.api_response import ApiResponse
from taskboard.models.board import Board
from taskboard.models.member import MembersData, PermissionsIdData
from taskboard.models.permissions import ObjectType, Permission
from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.services.base import fetch, handle_api_errors, persist, require, validate_permission


class BoardPermsService:
    """
    Membership of a board. Only members of the parent project can be granted
    access to one of its boards.
    """

    def __init__(self, perms_repository: ObjectPermsRepository, board_repository: BoardRepository):
        self.perms_repository = perms_repository
        self.board_repository = board_repository

    def _grant(self, object_id: int, user_id: int, object_type: ObjectType, what: str) -> Permission:
        return fetch(lambda: self.perms_repository.get(object_id, user_id, object_type), what)

    def _board(self, board_id: int) -> Board:
        return fetch(lambda: self.board_repository.get_by_id(board_id), "Board")

    def _board_in_project(self, project_id: int, board_id: int) -> Board:
        board = self._board(board_id)
        if board.project_id != project_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Board not found")
        return board

    def _board_default(self, board: Board) -> Permission:
        if board.default_permissions is None:
            logger.error(f"Board {board.id} has no default permissions")
            raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Board has no default permissions")
        return board.default_permissions

    def _caller_admin(self, user_id: int, project_id: int, board_id: int, message: str) -> Permission:
        self._grant(project_id, user_id, ObjectType.PROJECT, "Project permissions")
        caller = self._grant(board_id, user_id, ObjectType.BOARD, "Board permissions")
        require(caller, "admin", message)
        return caller

    @handle_api_errors
    def get_members(self, user_id: int, project_id: int, board_id: int) -> ApiResponse:
        self._grant(project_id, user_id, ObjectType.PROJECT, "Project permissions")
        caller = self._grant(board_id, user_id, ObjectType.BOARD, "Board permissions")
        require(caller, "read", "No read access to this board")
        board = self._board_in_project(project_id, board_id)

        members = fetch(lambda: self.perms_repository.get_members(board_id, ObjectType.BOARD), "Members")
        for member in members:
            member.is_owner = member.user_id == board.owner_id
        return ApiResponse.ok(MembersData(members=members))

    @handle_api_errors
    def create(self, user_id: int, project_id: int, board_id: int, member_id: int,
               permission: Permission) -> ApiResponse:
        """
        Grant a project member access to a board.

        The checks run in a fixed order and the first failure wins: malformed
        permission (400), default substitution for an empty permission, the
        caller's project and board grants (404), the caller's admin flag (403),
        the member's project grant (404) and finally the insert (409 when the
        member already has a grant).
        """
        validate_permission(permission)
        if permission.is_empty():
            permission = self._board_default(self._board(board_id))

        self._caller_admin(user_id, project_id, board_id, "Only board admins can add members")
        self._grant(project_id, member_id, ObjectType.PROJECT, "Project member")

        permissions_id = persist(
            lambda: self.perms_repository.create(board_id, member_id, ObjectType.BOARD, permission),
            "Board member",
        )
        logger.info(f"User {member_id} added to board {board_id} by {user_id}")
        return ApiResponse.ok(PermissionsIdData(permissions_id=permissions_id))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, board_id: int, member_id: int,
               permission: Permission) -> ApiResponse:
        validate_permission(permission)

        self._caller_admin(user_id, project_id, board_id, "Only board admins can change member permissions")
        self._grant(board_id, member_id, ObjectType.BOARD, "Board member")

        board = self._board_in_project(project_id, board_id)
        if member_id == board.owner_id:
            raise ApiError(status.HTTP_403_FORBIDDEN, "Permissions of the board owner cannot be changed")
        if permission.is_empty():
            permission = self._board_default(board)

        persist(
            lambda: self.perms_repository.update(board_id, member_id, ObjectType.BOARD, permission),
            "Board member",
        )
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int, board_id: int, member_id: int) -> ApiResponse:
        self._grant(project_id, user_id, ObjectType.PROJECT, "Project permissions")
        caller = self._grant(board_id, user_id, ObjectType.BOARD, "Board permissions")
        if member_id != user_id:
            require(caller, "admin", "Only board admins can remove members")
        self._grant(board_id, member_id, ObjectType.BOARD, "Board member")

        board = self._board_in_project(project_id, board_id)
        if member_id == board.owner_id:
            raise ApiError(status.HTTP_403_FORBIDDEN, "The board owner cannot be removed")

        persist(lambda: self.perms_repository.delete(board_id, member_id, ObjectType.BOARD), "Board member")
        logger.info(f"User {member_id} removed from board {board_id} by {user_id}")
        return ApiResponse.ok()
