from unittest.mock import Mock

import pytest

from taskboard.exceptions import NotFoundError, RepositoryError
from taskboard.models.board import Board
from taskboard.models.permissions import FULL_PERMISSION, ObjectType, Permission
from taskboard.models.task_list import ListIdData, TaskList, TaskListCreate, TaskListUpdate
from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.task_list_repository import TaskListRepository
from taskboard.services.access import BoardContentAccess
from taskboard.services.task_list_service import TaskListService

PROJECT_ID = 1
BOARD_ID = 2
USER_ID = 10


def build_service(project_perms=FULL_PERMISSION, board_perms=FULL_PERMISSION, board_project_id=PROJECT_ID):
    perms_repository = Mock(spec=ObjectPermsRepository)
    board_repository = Mock(spec=BoardRepository)
    task_list_repository = Mock(spec=TaskListRepository)

    grants = {ObjectType.PROJECT: project_perms, ObjectType.BOARD: board_perms}

    def get(object_id, user_id, object_type):
        result = grants[object_type]
        if isinstance(result, Exception):
            raise result
        return result

    perms_repository.get.side_effect = get
    board_repository.get_by_id.return_value = Board(
        id=BOARD_ID, project_id=board_project_id, owner_id=USER_ID, title="Board"
    )
    access = BoardContentAccess(perms_repository, board_repository, task_list_repository)
    return TaskListService(task_list_repository, access), task_list_repository


@pytest.mark.parametrize(
    "project_perms, board_perms, create_error, expected_code",
    [
        pytest.param(FULL_PERMISSION, FULL_PERMISSION, None, 200, id="ok"),
        pytest.param(NotFoundError("none"), FULL_PERMISSION, None, 403, id="no-project-grant"),
        pytest.param(FULL_PERMISSION, NotFoundError("none"), None, 403, id="no-board-grant"),
        pytest.param(FULL_PERMISSION, Permission(read=True), None, 403, id="board-read-only"),
        pytest.param(RepositoryError("db"), FULL_PERMISSION, None, 500, id="project-lookup-error"),
        pytest.param(FULL_PERMISSION, FULL_PERMISSION, RepositoryError("insert failed"), 500, id="repo-error"),
    ],
)
def test_create_list(project_perms, board_perms, create_error, expected_code):
    service, task_list_repository = build_service(project_perms, board_perms)
    if create_error:
        task_list_repository.create.side_effect = create_error
    else:
        task_list_repository.create.return_value = 5

    response = service.create(USER_ID, PROJECT_ID, BOARD_ID, TaskListCreate(title="Todo"))

    assert response.code == expected_code
    if expected_code == 200:
        assert response.data == ListIdData(list_id=5)


def test_create_list_on_board_of_another_project():
    service, task_list_repository = build_service(board_project_id=99)

    response = service.create(USER_ID, PROJECT_ID, BOARD_ID, TaskListCreate(title="Todo"))

    assert response.code == 404
    task_list_repository.create.assert_not_called()


def test_read_only_member_can_list_but_not_update():
    service, task_list_repository = build_service(board_perms=Permission(read=True))
    task_list_repository.get_all.return_value = [TaskList(id=3, board_id=BOARD_ID, title="Todo", position=0)]

    assert service.get_all(USER_ID, PROJECT_ID, BOARD_ID).is_ok
    assert service.update(USER_ID, PROJECT_ID, BOARD_ID, 3, TaskListUpdate(title="Done")).code == 403
    task_list_repository.update.assert_not_called()


def test_list_of_another_board_is_not_found():
    service, task_list_repository = build_service()
    task_list_repository.get_by_id.return_value = TaskList(id=3, board_id=BOARD_ID + 1, title="Todo", position=0)

    response = service.delete(USER_ID, PROJECT_ID, BOARD_ID, 3)

    assert response.code == 404
    task_list_repository.delete.assert_not_called()
