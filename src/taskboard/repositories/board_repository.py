# repositories/board_repository.py
from typing import List, Optional

from sqlmodel import col, select

from taskboard.models.board import Board, BoardCreate, BoardUpdate
from taskboard.models.permissions import (
    FULL_PERMISSION,
    ObjectPerms,
    ObjectType,
    Permission,
    default_permission_columns,
)
from taskboard.repositories.base import BaseRepository
from taskboard.repositories.cascade import delete_boards
from taskboard.utils import utc_now


class BoardRepository(BaseRepository):
    def create(self, owner_id: int, project_id: int, board: BoardCreate,
               default_permissions: Optional[Permission]) -> int:
        """
        Create a new board inside a project and grant full permissions to its owner.

        default_permissions is the value stored on the board; the caller decides
        whether it comes from the request or from the parent project.
        """
        with self.session() as session:
            db_board = Board(
                project_id=project_id,
                owner_id=owner_id,
                title=board.title,
                **default_permission_columns(default_permissions),
            )
            session.add(db_board)
            session.flush()

            session.add(
                ObjectPerms(
                    object_id=db_board.id,
                    user_id=owner_id,
                    object_type=int(ObjectType.BOARD),
                    **FULL_PERMISSION.model_dump(),
                )
            )
            session.commit()
            session.refresh(db_board)
            return db_board.id

    def get_all(self, project_id: int, user_id: int) -> List[Board]:
        """
        Get the boards of a project that the user holds a grant on.
        """
        with self.session() as session:
            accessible_ids = select(ObjectPerms.object_id).where(
                ObjectPerms.user_id == user_id,
                ObjectPerms.object_type == int(ObjectType.BOARD),
            )
            statement = (
                select(Board)
                .where(Board.project_id == project_id, col(Board.id).in_(accessible_ids))
                .order_by(Board.id)
            )
            return list(session.exec(statement).all())

    def get_ids_by_project(self, project_id: int) -> List[int]:
        with self.session() as session:
            statement = select(Board.id).where(Board.project_id == project_id)
            return list(session.exec(statement).all())

    def get_by_id(self, board_id: int) -> Board:
        with self.session() as session:
            return self.get_or_raise(session, Board, board_id)

    def update(self, board_id: int, board: BoardUpdate) -> None:
        with self.session() as session:
            db_board = self.get_or_raise(session, Board, board_id)
            if board.title is not None:
                db_board.title = board.title
            if board.default_permissions is not None:
                for key, value in default_permission_columns(board.default_permissions).items():
                    setattr(db_board, key, value)
            db_board.updated_at = utc_now()
            session.add(db_board)
            session.commit()

    def delete(self, board_id: int) -> None:
        """
        Delete a board with its lists, tasks, labels and grants.
        """
        with self.session() as session:
            self.get_or_raise(session, Board, board_id)
            delete_boards(session, [board_id])
            session.commit()
