# repositories/label_repository.py
from typing import List

from sqlmodel import select

from taskboard.exceptions import NotFoundError
from taskboard.models.label import Label, LabelCreate, LabelUpdate, TaskLabel
from taskboard.repositories.base import BaseRepository
from taskboard.repositories.cascade import delete_labels


class LabelRepository(BaseRepository):
    def create(self, board_id: int, label: LabelCreate) -> int:
        with self.session() as session:
            db_label = Label(board_id=board_id, name=label.name, color=label.color)
            session.add(db_label)
            session.commit()
            session.refresh(db_label)
            return db_label.id

    def get_all(self, board_id: int) -> List[Label]:
        with self.session() as session:
            statement = select(Label).where(Label.board_id == board_id).order_by(Label.id)
            return list(session.exec(statement).all())

    def get_by_id(self, label_id: int) -> Label:
        with self.session() as session:
            return self.get_or_raise(session, Label, label_id)

    def update(self, label_id: int, label: LabelUpdate) -> None:
        with self.session() as session:
            db_label = self.get_or_raise(session, Label, label_id)
            label_data = label.model_dump(exclude_unset=True, exclude_none=True)
            for key, value in label_data.items():
                setattr(db_label, key, value)
            session.add(db_label)
            session.commit()

    def delete(self, label_id: int) -> None:
        """
        Delete a label and detach it from every task.
        """
        with self.session() as session:
            self.get_or_raise(session, Label, label_id)
            delete_labels(session, [label_id])
            session.commit()


class TaskLabelRepository(BaseRepository):
    def create(self, task_id: int, label_id: int) -> int:
        """
        Attach a label to a task. Attaching twice raises AlreadyExistsError.
        """
        with self.session() as session:
            task_label = TaskLabel(task_id=task_id, label_id=label_id)
            session.add(task_label)
            session.commit()
            session.refresh(task_label)
            return task_label.id

    def get_all(self, task_id: int) -> List[Label]:
        with self.session() as session:
            statement = (
                select(Label)
                .join(TaskLabel, TaskLabel.label_id == Label.id)
                .where(TaskLabel.task_id == task_id)
                .order_by(Label.id)
            )
            return list(session.exec(statement).all())

    def delete(self, task_id: int, label_id: int) -> None:
        with self.session() as session:
            statement = select(TaskLabel).where(
                TaskLabel.task_id == task_id,
                TaskLabel.label_id == label_id,
            )
            task_label = session.exec(statement).first()
            if task_label is None:
                raise NotFoundError(f"Label {label_id} is not attached to task {task_id}")
            session.delete(task_label)
            session.commit()
