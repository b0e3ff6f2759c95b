# repositories/cascade.py
"""
Ordered deletes for the object tree. Grants live in a table without foreign
keys to their objects, so they are removed explicitly alongside the rows.
All helpers run inside the caller's session and leave the commit to it.
"""
from typing import List

from sqlalchemy import delete
from sqlmodel import Session, col, select

from taskboard.models.board import Board
from taskboard.models.label import Label, TaskLabel
from taskboard.models.permissions import ObjectPerms, ObjectType
from taskboard.models.task import Task
from taskboard.models.task_list import TaskList


def delete_tasks(session: Session, task_ids: List[int]) -> None:
    if not task_ids:
        return
    session.exec(delete(TaskLabel).where(col(TaskLabel.task_id).in_(task_ids)))
    session.exec(delete(Task).where(col(Task.id).in_(task_ids)))


def delete_lists(session: Session, list_ids: List[int]) -> None:
    if not list_ids:
        return
    task_ids = list(session.exec(select(Task.id).where(col(Task.list_id).in_(list_ids))).all())
    delete_tasks(session, task_ids)
    session.exec(delete(TaskList).where(col(TaskList.id).in_(list_ids)))


def delete_labels(session: Session, label_ids: List[int]) -> None:
    if not label_ids:
        return
    session.exec(delete(TaskLabel).where(col(TaskLabel.label_id).in_(label_ids)))
    session.exec(delete(Label).where(col(Label.id).in_(label_ids)))


def delete_boards(session: Session, board_ids: List[int]) -> None:
    if not board_ids:
        return
    list_ids = list(session.exec(select(TaskList.id).where(col(TaskList.board_id).in_(board_ids))).all())
    delete_lists(session, list_ids)
    label_ids = list(session.exec(select(Label.id).where(col(Label.board_id).in_(board_ids))).all())
    delete_labels(session, label_ids)
    session.exec(
        delete(ObjectPerms).where(
            ObjectPerms.object_type == int(ObjectType.BOARD),
            col(ObjectPerms.object_id).in_(board_ids),
        )
    )
    session.exec(delete(Board).where(col(Board.id).in_(board_ids)))


def delete_project(session: Session, project_id: int) -> None:
    board_ids = list(session.exec(select(Board.id).where(Board.project_id == project_id)).all())
    delete_boards(session, board_ids)
    session.exec(
        delete(ObjectPerms).where(
            ObjectPerms.object_type == int(ObjectType.PROJECT),
            ObjectPerms.object_id == project_id,
        )
    )
