# repositories/task_list_repository.py
from typing import List

from sqlmodel import Session, select

from taskboard.models.task_list import TaskList, TaskListCreate, TaskListUpdate
from taskboard.repositories.base import BaseRepository, clamp_position, renumber
from taskboard.repositories.cascade import delete_lists


class TaskListRepository(BaseRepository):
    @staticmethod
    def _siblings(session: Session, board_id: int) -> List[TaskList]:
        statement = (
            select(TaskList)
            .where(TaskList.board_id == board_id)
            .order_by(TaskList.position, TaskList.id)
        )
        return list(session.exec(statement).all())

    def create(self, board_id: int, task_list: TaskListCreate) -> int:
        """
        Create a list on a board, appended at the end unless a position is given.
        """
        with self.session() as session:
            siblings = self._siblings(session, board_id)
            db_list = TaskList(board_id=board_id, title=task_list.title)
            siblings.insert(clamp_position(task_list.position, len(siblings)), db_list)
            renumber(siblings)
            session.add_all(siblings)
            session.commit()
            session.refresh(db_list)
            return db_list.id

    def get_all(self, board_id: int) -> List[TaskList]:
        with self.session() as session:
            return self._siblings(session, board_id)

    def get_by_id(self, list_id: int) -> TaskList:
        with self.session() as session:
            return self.get_or_raise(session, TaskList, list_id, "List")

    def update(self, list_id: int, task_list: TaskListUpdate) -> None:
        """
        Rename and/or reorder a list; siblings are renumbered densely.
        """
        with self.session() as session:
            db_list = self.get_or_raise(session, TaskList, list_id, "List")
            if task_list.title is not None:
                db_list.title = task_list.title
            if task_list.position is not None:
                siblings = [item for item in self._siblings(session, db_list.board_id) if item.id != db_list.id]
                siblings.insert(clamp_position(task_list.position, len(siblings)), db_list)
                renumber(siblings)
                session.add_all(siblings)
            session.add(db_list)
            session.commit()

    def delete(self, list_id: int) -> None:
        """
        Delete a list with its tasks and close the gap it leaves.
        """
        with self.session() as session:
            db_list = self.get_or_raise(session, TaskList, list_id, "List")
            board_id = db_list.board_id
            delete_lists(session, [list_id])
            session.flush()
            renumber(self._siblings(session, board_id))
            session.commit()
