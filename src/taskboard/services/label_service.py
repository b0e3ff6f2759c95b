# services/label_service.py
from fastapi import status

from taskboard.exceptions import ApiError
from taskboard.models.api_response import ApiResponse
from taskboard.models.label import (
    Label,
    LabelCreate,
    LabelData,
    LabelIdData,
    LabelRead,
    LabelsData,
    LabelUpdate,
    TaskLabelIdData,
)
from taskboard.repositories.label_repository import LabelRepository, TaskLabelRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.services.access import BoardContentAccess
from taskboard.services.base import fetch, handle_api_errors, persist


class LabelService:
    """Board labels and their attachment to tasks."""

    def __init__(self, label_repository: LabelRepository, task_label_repository: TaskLabelRepository,
                 task_repository: TaskRepository, access: BoardContentAccess):
        self.label_repository = label_repository
        self.task_label_repository = task_label_repository
        self.task_repository = task_repository
        self.access = access

    def _label_on_board(self, board_id: int, label_id: int) -> Label:
        label = fetch(lambda: self.label_repository.get_by_id(label_id), "Label")
        if label.board_id != board_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Label not found")
        return label

    def _check_task(self, board_id: int, list_id: int, task_id: int) -> None:
        self.access.get_list(board_id, list_id)
        task = fetch(lambda: self.task_repository.get_by_id(task_id), "Task")
        if task.list_id != list_id:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Task not found")

    @handle_api_errors
    def create(self, user_id: int, project_id: int, board_id: int, label: LabelCreate) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        label_id = persist(lambda: self.label_repository.create(board_id, label), "Label")
        return ApiResponse.ok(LabelIdData(label_id=label_id))

    @handle_api_errors
    def get_all(self, user_id: int, project_id: int, board_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        labels = fetch(lambda: self.label_repository.get_all(board_id), "Labels")
        return ApiResponse.ok(LabelsData(labels=[LabelRead.from_model(label) for label in labels]))

    @handle_api_errors
    def get_by_id(self, user_id: int, project_id: int, board_id: int, label_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        label = self._label_on_board(board_id, label_id)
        return ApiResponse.ok(LabelData(label=LabelRead.from_model(label)))

    @handle_api_errors
    def update(self, user_id: int, project_id: int, board_id: int, label_id: int, label: LabelUpdate) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self._label_on_board(board_id, label_id)
        persist(lambda: self.label_repository.update(label_id, label), "Label")
        return ApiResponse.ok()

    @handle_api_errors
    def delete(self, user_id: int, project_id: int, board_id: int, label_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self._label_on_board(board_id, label_id)
        persist(lambda: self.label_repository.delete(label_id), "Label")
        return ApiResponse.ok()

    @handle_api_errors
    def get_task_labels(self, user_id: int, project_id: int, board_id: int, list_id: int,
                        task_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "read")
        self._check_task(board_id, list_id, task_id)
        labels = fetch(lambda: self.task_label_repository.get_all(task_id), "Labels")
        return ApiResponse.ok(LabelsData(labels=[LabelRead.from_model(label) for label in labels]))

    @handle_api_errors
    def add_task_label(self, user_id: int, project_id: int, board_id: int, list_id: int, task_id: int,
                       label_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self._check_task(board_id, list_id, task_id)
        self._label_on_board(board_id, label_id)
        task_label_id = persist(lambda: self.task_label_repository.create(task_id, label_id), "Task label")
        return ApiResponse.ok(TaskLabelIdData(task_label_id=task_label_id))

    @handle_api_errors
    def remove_task_label(self, user_id: int, project_id: int, board_id: int, list_id: int, task_id: int,
                          label_id: int) -> ApiResponse:
        self.access.authorize(user_id, project_id, board_id, "write")
        self._check_task(board_id, list_id, task_id)
        persist(lambda: self.task_label_repository.delete(task_id, label_id), "Task label")
        return ApiResponse.ok()
