# services/task_list_service.py
from taskboard.models.api_response import ApiResponse
from taskboard.models.task_list import (
    ListData,
    ListIdData,
    ListsData,
    TaskListCreate,
    TaskListRead,
    TaskListUpdate,
)
from taskboard.repositories.task_list_repository import TaskListRepository
from taskboard.services.access import BoardContentAccess
from taskboard.services.base import fetch, handle_api_errors, persist


class TaskListService:
    def __init__(self, task_list_repository: TaskListRepository, access: BoardContentAccess):
        self.task_list_repository = task_list_repository
        self.access = access

    @handle_api_errors
    def create(self, user_id: int, project_id: int, board_id: int, task_list: TaskListCreate) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        list_id = persist(lambda: self.task_list_repository.create(board_id, task_list), "List")
        return ApiResponse.ok(ListIdData(list_id=list_id))

    @handle_api_errors
    def get_all(self, user_id: int, project_id: int, board_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        lists = fetch(lambda: self.task_list_repository.get_all(board_id), "Lists")
        return ApiResponse.ok(ListsData(lists=[TaskListRead.from_model(item) for item in lists]))

    @handle_api_errors
    def get_by_id(self, user_id: int, project_id: int, board_id: int, list_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        task_list = self.access.get_list(board_id, list_id)
        return ApiResponse.ok(ListData(task_list=TaskListRead.from_model(task_list)))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, board_id: int, list_id: int,
               task_list: TaskListUpdate) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self.access.get_list(board_id, list_id)
        persist(lambda: self.task_list_repository.update(list_id, task_list), "List")
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int, board_id: int, list_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self.access.get_list(board_id, list_id)
        persist(lambda: self.task_list_repository.delete(list_id), "List")
        return ApiResponse.ok()
