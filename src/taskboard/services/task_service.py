# services/task_service.py
from fastapi import status

from taskboard.exceptions import ApiError
from taskboard.models.api_response import ApiResponse
from taskboard.models.task import Task, TaskCreate, TaskData, TaskIdData, TaskRead, TasksData, TaskUpdate
from taskboard.repositories.task_repository import TaskRepository
from taskboard.services.access import BoardContentAccess
from taskboard.services.base import fetch, handle_api_errors, persist


class TaskService:
    def __init__(self, task_repository: TaskRepository, access: BoardContentAccess):
        self.task_repository = task_repository
        self.access = access

    def _task_in_list(self, list_id: int, task_id: int) -> Task:
        task = fetch(lambda: self.task_repository.get_by_id(task_id), "Task")
        if task.list_id != list_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Task not found")
        return task

    @handle_api_errors
    def create(self, user_id: int, project_id: int, board_id: int, list_id: int, task: TaskCreate) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self.access.get_list(board_id, list_id)
        task_id = persist(lambda: self.task_repository.create(list_id, task), "Task")
        return ApiResponse.ok(TaskIdData(task_id=task_id))

    @handle_api_errors
    def get_all(self, user_id: int, project_id: int, board_id: int, list_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        self.access.get_list(board_id, list_id)
        tasks = fetch(lambda: self.task_repository.get_all(list_id), "Tasks")
        return ApiResponse.ok(TasksData(tasks=[TaskRead.from_model(task) for task in tasks]))

    @handle_api_errors
    def get_by_id(self, user_id: int, project_id: int, board_id: int, list_id: int, task_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        self.access.get_list(board_id, list_id)
        task = self._task_in_list(list_id, task_id)
        return ApiResponse.ok(TaskData(task=TaskRead.from_model(task)))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, board_id: int, list_id: int, task_id: int,
               task: TaskUpdate) -> ApiResponse:
        """
        Update a task. Moving it to another list is allowed only within the
        same board; both lists keep dense positions.
        """
        self.access.authorize(user_id, project_id, board_id, "write")
        self.access.get_list(board_id, list_id)
        self._task_in_list(list_id, task_id)
        if task.list_id is not None and task.list_id != list_id:
            self.access.get_list(board_id, task.list_id)

        persist(lambda: self.task_repository.update(task_id, task), "Task")
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int, board_id: int, list_id: int, task_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self.access.get_list(board_id, list_id)
        self._task_in_list(list_id, task_id)
        persist(lambda: self.task_repository.delete(task_id), "Task")
        return ApiResponse.ok()
