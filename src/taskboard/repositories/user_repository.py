# repositories/user_repository.py
from typing import List

from sqlmodel import select

from taskboard.exceptions import NotFoundError
from taskboard.models.user import User
from taskboard.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    def create(self, user: User) -> int:
        with self.session() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            return user.id

    def get_all(self) -> List[User]:
        with self.session() as session:
            statement = select(User).order_by(User.nickname)
            return list(session.exec(statement).all())

    def get_by_id(self, user_id: int) -> User:
        with self.session() as session:
            return self.get_or_raise(session, User, user_id)

    def get_by_nickname(self, nickname: str) -> User:
        with self.session() as session:
            statement = select(User).where(User.nickname == nickname)
            user = session.exec(statement).first()
            if not user:
                raise NotFoundError(f"User {nickname!r} not found")
            return user
