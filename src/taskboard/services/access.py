# services/access.py
from fastapi import status

from taskboard.exceptions import ApiError
from taskboard.models.board import Board
from taskboard.models.permissions import ObjectType
from taskboard.models.task_list import TaskList
from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.task_list_repository import TaskListRepository
from taskboard.services.base import fetch, require


class BoardContentAccess:
    """
    Authorization for the content of a board (lists, tasks, labels).

    The caller needs an explicit grant on both the project and the board;
    a missing grant is reported as 403 here, unlike the management routes.
    """

    def __init__(self, perms_repository: ObjectPermsRepository, board_repository: BoardRepository,
                 task_list_repository: TaskListRepository):
        self.perms_repository = perms_repository
        self.board_repository = board_repository
        self.task_list_repository = task_list_repository

    def authorize(self, user_id: int, project_id: int, board_id: int, flag: str) -> Board:
        project_perms = fetch(
            lambda: self.perms_repository.get(project_id, user_id, ObjectType.PROJECT),
            "Project permissions",
            missing_code=status.HTTP_403_FORBIDDEN,
        )
        require(project_perms, "read", "No access to this project")

        board_perms = fetch(
            lambda: self.perms_repository.get(board_id, user_id, ObjectType.BOARD),
            "Board permissions",
            missing_code=status.HTTP_403_FORBIDDEN,
        )
        require(board_perms, flag, f"No {flag} access to this board")

        board = fetch(lambda: self.board_repository.get_by_id(board_id), "Board")
        if board.project_id != project_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Board not found")
        return board

    def get_list(self, board_id: int, list_id: int) -> TaskList:
        task_list = fetch(lambda: self.task_list_repository.get_by_id(list_id), "List")
        if task_list.board_id != board_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "List not found")
        return task_list
