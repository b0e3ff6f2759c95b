# services/service.py
from taskboard.config import Settings
from taskboard.repositories.repository import Repository
from taskboard.services.access import BoardContentAccess
from taskboard.services.board_perms_service import BoardPermsService
from taskboard.services.board_service import BoardService
from taskboard.services.label_service import LabelService
from taskboard.services.project_perms_service import ProjectPermsService
from taskboard.services.project_service import ProjectService
from taskboard.services.task_list_service import TaskListService
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService


class Service:
    """All services wired to one set of repositories."""

    def __init__(self, repos: Repository, settings: Settings):
        access = BoardContentAccess(repos.object_perms, repos.board, repos.task_list)

        self.user = UserService(repos.user, settings)
        self.project = ProjectService(repos.project, repos.object_perms)
        self.project_perms = ProjectPermsService(repos.object_perms, repos.project, repos.board, repos.user)
        self.board = BoardService(repos.board, repos.project, repos.object_perms)
        self.board_perms = BoardPermsService(repos.object_perms, repos.board)
        self.task_list = TaskListService(repos.task_list, access)
        self.task = TaskService(repos.task, access)
        self.label = LabelService(repos.label, repos.task_label, repos.task, access)
