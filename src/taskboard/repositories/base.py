# repositories/base.py
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, TypeVar

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from taskboard.exceptions import AlreadyExistsError, NotFoundError, RepositoryError

PositionedT = TypeVar("PositionedT")


class BaseRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Open a session for a single repository operation and translate
        SQLAlchemy failures into repository errors.
        """
        with Session(self.engine) as session:
            try:
                yield session
            except IntegrityError as e:
                session.rollback()
                logger.warning(f"{type(self).__name__}: integrity error: {e.orig}")
                raise AlreadyExistsError(str(e.orig)) from e
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"{type(self).__name__}: database error: {e}")
                raise RepositoryError(str(e)) from e

    @staticmethod
    def get_or_raise(session: Session, model, object_id: int, name: Optional[str] = None):
        obj = session.get(model, object_id)
        if obj is None:
            raise NotFoundError(f"{name or model.__name__} {object_id} not found")
        return obj


def clamp_position(position: Optional[int], size: int) -> int:
    """Clamp a requested position into [0, size]; None means the end."""
    if position is None or position > size:
        return size
    return max(position, 0)


def renumber(items: Sequence[PositionedT]) -> List[PositionedT]:
    """Rewrite positions so they form a dense 0-based sequence in list order."""
    for index, item in enumerate(items):
        if item.position != index:
            item.position = index
    return list(items)
