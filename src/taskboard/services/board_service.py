# services/board_service.py
from fastapi import status
from loguru import logger

from taskboard.exceptions import ApiError
from taskboard.models.api_response import ApiResponse
from taskboard.models.board import Board, BoardCreate, BoardData, BoardIdData, BoardRead, BoardsData, BoardUpdate
from taskboard.models.permissions import ObjectType, Permission
from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.services.base import fetch, handle_api_errors, persist, require, validate_permission


class BoardService:
    def __init__(self, board_repository: BoardRepository, project_repository: ProjectRepository,
                 perms_repository: ObjectPermsRepository):
        self.board_repository = board_repository
        self.project_repository = project_repository
        self.perms_repository = perms_repository

    def _project_permission(self, user_id: int, project_id: int) -> Permission:
        return fetch(lambda: self.perms_repository.get(project_id, user_id, ObjectType.PROJECT), "Project")

    def _board_permission(self, user_id: int, board_id: int) -> Permission:
        return fetch(lambda: self.perms_repository.get(board_id, user_id, ObjectType.BOARD), "Board")

    def _board_in_project(self, project_id: int, board_id: int) -> Board:
        board = fetch(lambda: self.board_repository.get_by_id(board_id), "Board")
        if board.project_id != project_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Board not found")
        return board

    @handle_api_errors
    def create(self, user_id: int, project_id: int, board: BoardCreate) -> ApiResponse:
        if board.default_permissions is not None:
            validate_permission(board.default_permissions)

        permission = self._project_permission(user_id, project_id)
        require(permission, "write", "No write access to this project")

        default_permissions = board.default_permissions
        if default_permissions is None:
            project = fetch(lambda: self.project_repository.get_by_id(project_id), "Project")
            default_permissions = project.default_permissions

        board_id = persist(
            lambda: self.board_repository.create(user_id, project_id, board, default_permissions),
            "Board",
        )
        logger.info(f"User {user_id} created board {board_id} in project {project_id}")
        return ApiResponse.ok(BoardIdData(board_id=board_id))

    @handle_api_errors
    def get_all(self, user_id: int, project_id: int) -> ApiResponse:
        require(self._project_permission(user_id, project_id), "read", "No read access to this project")
        boards = fetch(lambda: self.board_repository.get_all(project_id, user_id), "Boards")
        return ApiResponse.ok(BoardsData(boards=[BoardRead.from_model(b) for b in boards]))

    @handle_api_errors
    def get_by_id(self, user_id: int, project_id: int, board_id: int) -> ApiResponse:
        require(self._project_permission(user_id, project_id), "read", "No read access to this project")
        require(self._board_permission(user_id, board_id), "read", "No read access to this board")
        board = self._board_in_project(project_id, board_id)
        return ApiResponse.ok(BoardData(board=BoardRead.from_model(board)))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, board_id: int, board: BoardUpdate) -> ApiResponse:
        if board.default_permissions is not None:
            validate_permission(board.default_permissions)

        self._project_permission(user_id, project_id)
        permission = self._board_permission(user_id, board_id)
        require(permission, "write", "No write access to this board")
        if board.default_permissions is not None:
            require(permission, "admin", "Only board admins can change default permissions")
        self._board_in_project(project_id, board_id)

        persist(lambda: self.board_repository.update(board_id, board), "Board")
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int, board_id: int) -> ApiResponse:
        self._project_permission(user_id, project_id)
        require(self._board_permission(user_id, board_id), "admin", "Only board admins can delete the board")
        self._board_in_project(project_id, board_id)

        persist(lambda: self.board_repository.delete(board_id), "Board")
        logger.info(f"User {user_id} deleted board {board_id}")
        return ApiResponse.ok()
