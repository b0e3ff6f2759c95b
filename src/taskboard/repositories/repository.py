# repositories/repository.py
from sqlalchemy.engine import Engine

from taskboard.repositories.board_repository import BoardRepository
from taskboard.repositories.label_repository import LabelRepository, TaskLabelRepository
from taskboard.repositories.object_perms_repository import ObjectPermsRepository
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.repositories.task_list_repository import TaskListRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.repositories.user_repository import UserRepository


class Repository:
    """All repositories bound to one engine."""

    def __init__(self, engine: Engine):
        self.user = UserRepository(engine)
        self.object_perms = ObjectPermsRepository(engine)
        self.project = ProjectRepository(engine)
        self.board = BoardRepository(engine)
        self.task_list = TaskListRepository(engine)
        self.task = TaskRepository(engine)
        self.label = LabelRepository(engine)
        self.task_label = TaskLabelRepository(engine)
