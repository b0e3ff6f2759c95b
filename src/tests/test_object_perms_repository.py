import pytest

from taskboard.exceptions import NotFoundError
from taskboard.models.permissions import FULL_PERMISSION, ObjectType, Permission
from taskboard.models.user import User
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.user_repository import UserRepository

PROJECT_ID = 1
BOARD_IDS = [11, 12]
OTHER_BOARD_ID = 99


@pytest.fixture
def repository(engine):
    return ObjectPermsRepository(engine)


@pytest.fixture
def member_id(engine):
    return UserRepository(engine).create(User(nickname="bob", email="bob@example.com", password_hash="x"))


def test_delete_project_member_removes_project_and_board_grants(repository, member_id):
    repository.create(PROJECT_ID, member_id, ObjectType.PROJECT, Permission(read=True))
    for board_id in BOARD_IDS + [OTHER_BOARD_ID]:
        repository.create(board_id, member_id, ObjectType.BOARD, Permission(read=True))

    repository.delete_project_member(PROJECT_ID, member_id, BOARD_IDS)

    with pytest.raises(NotFoundError):
        repository.get(PROJECT_ID, member_id, ObjectType.PROJECT)
    for board_id in BOARD_IDS:
        with pytest.raises(NotFoundError):
            repository.get(board_id, member_id, ObjectType.BOARD)
    assert repository.get(OTHER_BOARD_ID, member_id, ObjectType.BOARD) == Permission(read=True)


def test_delete_project_member_without_grant_keeps_board_grants(repository, member_id):
    repository.create(BOARD_IDS[0], member_id, ObjectType.BOARD, FULL_PERMISSION)

    with pytest.raises(NotFoundError):
        repository.delete_project_member(PROJECT_ID, member_id, BOARD_IDS)

    assert repository.get(BOARD_IDS[0], member_id, ObjectType.BOARD) == FULL_PERMISSION
