from unittest.mock import Mock

import pytest

from taskboard.exceptions import AlreadyExistsError, NotFoundError, RepositoryError
from taskboard.models.board import Board
from taskboard.models.member import PermissionsIdData
from taskboard.models.permissions import FULL_PERMISSION, ObjectType, Permission
from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.services.board_perms_service import BoardPermsService

PROJECT_ID = 1
BOARD_ID = 2
CALLER_ID = 10
MEMBER_ID = 20
NEW_PERMS_ID = 7

READ_WRITE = Permission(read=True, write=True)
READ_ONLY = Permission(read=True)
EMPTY = Permission()


def make_board(default=READ_ONLY):
    columns = {"default_read": None, "default_write": None, "default_admin": None}
    if default is not None:
        columns = {"default_read": default.read, "default_write": default.write, "default_admin": default.admin}
    return Board(id=BOARD_ID, project_id=PROJECT_ID, owner_id=CALLER_ID, title="Board", **columns)


def make_grants(caller_project=FULL_PERMISSION, caller_board=FULL_PERMISSION, member_project=READ_ONLY):
    return {
        (PROJECT_ID, CALLER_ID, ObjectType.PROJECT): caller_project,
        (BOARD_ID, CALLER_ID, ObjectType.BOARD): caller_board,
        (PROJECT_ID, MEMBER_ID, ObjectType.PROJECT): member_project,
    }


def build_service(grants, board, create_result):
    perms_repository = Mock(spec=ObjectPermsRepository)
    board_repository = Mock(spec=BoardRepository)

    def get(object_id, user_id, object_type):
        result = grants.get((object_id, user_id, object_type), NotFoundError("no grant"))
        if isinstance(result, Exception):
            raise result
        return result

    perms_repository.get.side_effect = get
    if isinstance(create_result, Exception):
        perms_repository.create.side_effect = create_result
    else:
        perms_repository.create.return_value = create_result
    if isinstance(board, Exception):
        board_repository.get_by_id.side_effect = board
    else:
        board_repository.get_by_id.return_value = board

    return BoardPermsService(perms_repository, board_repository), perms_repository, board_repository


@pytest.mark.parametrize(
    "permission, board, grants, create_result, expected_code",
    [
        pytest.param(READ_WRITE, make_board(), make_grants(), NEW_PERMS_ID, 200, id="ok"),
        pytest.param(EMPTY, make_board(), make_grants(), NEW_PERMS_ID, 200, id="ok-empty-uses-board-default"),
        pytest.param(EMPTY, RepositoryError("db down"), make_grants(), NEW_PERMS_ID, 500, id="board-lookup-error"),
        pytest.param(EMPTY, NotFoundError("no board"), make_grants(), NEW_PERMS_ID, 404, id="board-not-found"),
        pytest.param(EMPTY, make_board(default=None), make_grants(), NEW_PERMS_ID, 500, id="board-without-default"),
        pytest.param(Permission(read=True, admin=True), make_board(), make_grants(), NEW_PERMS_ID, 400,
                     id="admin-without-write"),
        pytest.param(READ_WRITE, make_board(), make_grants(caller_project=NotFoundError("none")), NEW_PERMS_ID, 404,
                     id="caller-not-project-member"),
        pytest.param(READ_WRITE, make_board(), make_grants(caller_project=RepositoryError("db")), NEW_PERMS_ID, 500,
                     id="caller-project-lookup-error"),
        pytest.param(READ_WRITE, make_board(), make_grants(caller_board=NotFoundError("none")), NEW_PERMS_ID, 404,
                     id="caller-not-board-member"),
        pytest.param(READ_WRITE, make_board(), make_grants(caller_board=RepositoryError("db")), NEW_PERMS_ID, 500,
                     id="caller-board-lookup-error"),
        pytest.param(READ_WRITE, make_board(), make_grants(caller_board=READ_WRITE), NEW_PERMS_ID, 403,
                     id="caller-not-board-admin"),
        pytest.param(READ_WRITE, make_board(), make_grants(member_project=NotFoundError("none")), NEW_PERMS_ID, 404,
                     id="member-not-project-member"),
        pytest.param(READ_WRITE, make_board(), make_grants(member_project=RepositoryError("db")), NEW_PERMS_ID, 500,
                     id="member-lookup-error"),
        pytest.param(READ_WRITE, make_board(), make_grants(), RepositoryError("insert failed"), 500,
                     id="create-error"),
        pytest.param(READ_WRITE, make_board(), make_grants(), AlreadyExistsError("duplicate"), 409,
                     id="member-already-on-board"),
    ],
)
def test_create_board_permission(permission, board, grants, create_result, expected_code):
    service, perms_repository, _ = build_service(grants, board, create_result)

    response = service.create(CALLER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID, permission)

    assert response.code == expected_code
    if expected_code == 200:
        assert response.data == PermissionsIdData(permissions_id=NEW_PERMS_ID)


def test_create_with_malformed_permission_touches_no_repository():
    service, perms_repository, board_repository = build_service(make_grants(), make_board(), NEW_PERMS_ID)

    response = service.create(CALLER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID, Permission(admin=True))

    assert response.code == 400
    perms_repository.get.assert_not_called()
    board_repository.get_by_id.assert_not_called()


def test_create_with_explicit_permission_does_not_load_board():
    service, perms_repository, board_repository = build_service(make_grants(), make_board(), NEW_PERMS_ID)

    service.create(CALLER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID, READ_WRITE)

    board_repository.get_by_id.assert_not_called()
    perms_repository.create.assert_called_once_with(BOARD_ID, MEMBER_ID, ObjectType.BOARD, READ_WRITE)


def test_create_with_empty_permission_stores_board_default():
    default = Permission(read=True, write=True)
    service, perms_repository, _ = build_service(make_grants(), make_board(default=default), NEW_PERMS_ID)

    response = service.create(CALLER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID, EMPTY)

    assert response.is_ok
    perms_repository.create.assert_called_once_with(BOARD_ID, MEMBER_ID, ObjectType.BOARD, default)


def test_board_default_is_resolved_before_caller_checks():
    grants = make_grants(caller_project=NotFoundError("none"))
    service, perms_repository, _ = build_service(grants, make_board(default=None), NEW_PERMS_ID)

    response = service.create(CALLER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID, EMPTY)

    assert response.code == 500
    perms_repository.get.assert_not_called()


def test_board_owner_permissions_cannot_be_changed():
    grants = make_grants()
    grants[(BOARD_ID, CALLER_ID, ObjectType.BOARD)] = FULL_PERMISSION
    service, perms_repository, _ = build_service(grants, make_board(), NEW_PERMS_ID)

    response = service.update(CALLER_ID, PROJECT_ID, BOARD_ID, CALLER_ID, READ_ONLY)

    assert response.code == 403
    perms_repository.update.assert_not_called()


def test_member_can_leave_board_without_admin():
    grants = make_grants(caller_board=READ_ONLY)
    grants[(PROJECT_ID, MEMBER_ID, ObjectType.PROJECT)] = READ_ONLY
    grants[(BOARD_ID, MEMBER_ID, ObjectType.BOARD)] = READ_ONLY
    service, perms_repository, _ = build_service(grants, make_board(), NEW_PERMS_ID)

    response = service.delete(MEMBER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID)

    assert response.is_ok
    perms_repository.delete.assert_called_once_with(BOARD_ID, MEMBER_ID, ObjectType.BOARD)


def test_caller_without_project_grant_stops_before_board_and_insert():
    grants = make_grants(caller_project=NotFoundError("none"))
    service, perms_repository, board_repository = build_service(grants, make_board(), NEW_PERMS_ID)

    response = service.create(CALLER_ID, PROJECT_ID, BOARD_ID, MEMBER_ID, READ_WRITE)

    assert response.code == 404
    board_repository.get_by_id.assert_not_called()
    perms_repository.create.assert_not_called()
    perms_repository.get.assert_called_once_with(PROJECT_ID, CALLER_ID, ObjectType.PROJECT)
