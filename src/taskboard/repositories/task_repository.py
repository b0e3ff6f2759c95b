# repositories/task_repository.py
from typing import List

from sqlmodel import Session, select

from taskboard.models.task import Task, TaskCreate, TaskUpdate
from taskboard.repositories.base import BaseRepository, clamp_position, renumber
from taskboard.repositories.cascade import delete_tasks
from taskboard.utils import utc_now


class TaskRepository(BaseRepository):
    @staticmethod
    def _siblings(session: Session, list_id: int) -> List[Task]:
        statement = (
            select(Task)
            .where(Task.list_id == list_id)
            .order_by(Task.position, Task.id)
        )
        return list(session.exec(statement).all())

    def create(self, list_id: int, task: TaskCreate) -> int:
        """
        Create a task in a list, appended at the end unless a position is given.
        """
        with self.session() as session:
            siblings = self._siblings(session, list_id)
            db_task = Task(list_id=list_id, title=task.title, description=task.description)
            siblings.insert(clamp_position(task.position, len(siblings)), db_task)
            renumber(siblings)
            session.add_all(siblings)
            session.commit()
            session.refresh(db_task)
            return db_task.id

    def get_all(self, list_id: int) -> List[Task]:
        with self.session() as session:
            return self._siblings(session, list_id)

    def get_by_id(self, task_id: int) -> Task:
        with self.session() as session:
            return self.get_or_raise(session, Task, task_id)

    def update(self, task_id: int, task: TaskUpdate) -> None:
        """
        Update a task. A new position reorders it inside its list; a new list id
        moves it to that list (at the given position or at the end) and both
        lists are renumbered densely.
        """
        with self.session() as session:
            db_task = self.get_or_raise(session, Task, task_id)
            if task.title is not None:
                db_task.title = task.title
            if task.description is not None:
                db_task.description = task.description

            target_list_id = task.list_id if task.list_id is not None else db_task.list_id
            if target_list_id != db_task.list_id:
                source = [item for item in self._siblings(session, db_task.list_id) if item.id != db_task.id]
                renumber(source)
                session.add_all(source)
                target = self._siblings(session, target_list_id)
                db_task.list_id = target_list_id
                target.insert(clamp_position(task.position, len(target)), db_task)
                renumber(target)
                session.add_all(target)
            elif task.position is not None:
                siblings = [item for item in self._siblings(session, db_task.list_id) if item.id != db_task.id]
                siblings.insert(clamp_position(task.position, len(siblings)), db_task)
                renumber(siblings)
                session.add_all(siblings)

            db_task.updated_at = utc_now()
            session.add(db_task)
            session.commit()

    def delete(self, task_id: int) -> None:
        """
        Delete a task and close the gap it leaves in its list.
        """
        with self.session() as session:
            db_task = self.get_or_raise(session, Task, task_id)
            list_id = db_task.list_id
            delete_tasks(session, [task_id])
            session.flush()
            renumber(self._siblings(session, list_id))
            session.commit()
