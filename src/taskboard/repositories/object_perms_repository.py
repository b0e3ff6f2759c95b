# repositories/object_perms_repository.py
from typing import Iterable, List

from sqlalchemy import delete
from sqlmodel import Session, col, select

from taskboard.exceptions import NotFoundError
from taskboard.models.member import MemberRead
from taskboard.models.permissions import ObjectPerms, ObjectType, Permission
from taskboard.models.user import User
from taskboard.repositories.base import BaseRepository


class ObjectPermsRepository(BaseRepository):
    """
    Permission grants for projects and boards, kept in one table and told
    apart by object type.
    """

    @staticmethod
    def _find(session: Session, object_id: int, user_id: int, object_type: ObjectType) -> ObjectPerms:
        statement = select(ObjectPerms).where(
            ObjectPerms.object_id == object_id,
            ObjectPerms.user_id == user_id,
            ObjectPerms.object_type == int(object_type),
        )
        perms = session.exec(statement).first()
        if perms is None:
            raise NotFoundError(
                f"No {object_type.name.lower()} permissions for user {user_id} on {object_id}"
            )
        return perms

    def get(self, object_id: int, user_id: int, object_type: ObjectType) -> Permission:
        """
        Get the explicit permission a user holds on an object.

        Raises NotFoundError when the user has no grant on the object.
        """
        with self.session() as session:
            return self._find(session, object_id, user_id, object_type).permission

    def create(self, object_id: int, user_id: int, object_type: ObjectType, permission: Permission) -> int:
        """
        Grant a permission to a user on an object and return the grant id.
        """
        with self.session() as session:
            perms = ObjectPerms(
                object_id=object_id,
                user_id=user_id,
                object_type=int(object_type),
                read=permission.read,
                write=permission.write,
                admin=permission.admin,
            )
            session.add(perms)
            session.commit()
            session.refresh(perms)
            return perms.id

    def update(self, object_id: int, user_id: int, object_type: ObjectType, permission: Permission) -> None:
        with self.session() as session:
            perms = self._find(session, object_id, user_id, object_type)
            perms.read = permission.read
            perms.write = permission.write
            perms.admin = permission.admin
            session.add(perms)
            session.commit()

    def delete(self, object_id: int, user_id: int, object_type: ObjectType) -> None:
        with self.session() as session:
            perms = self._find(session, object_id, user_id, object_type)
            session.delete(perms)
            session.commit()

    def get_members(self, object_id: int, object_type: ObjectType) -> List[MemberRead]:
        """
        Get every user holding a grant on an object, with their permissions.
        """
        with self.session() as session:
            statement = (
                select(User, ObjectPerms)
                .join(ObjectPerms, User.id == ObjectPerms.user_id)
                .where(
                    ObjectPerms.object_id == object_id,
                    ObjectPerms.object_type == int(object_type),
                )
                .order_by(User.nickname)
            )
            return [
                MemberRead(user_id=user.id, nickname=user.nickname, permissions=perms.permission)
                for user, perms in session.exec(statement).all()
            ]

    def delete_project_member(self, project_id: int, user_id: int, board_ids: Iterable[int]) -> None:
        """
        Remove a user's project grant together with their grants on the given
        boards of that project, in one transaction.
        """
        board_ids = list(board_ids)
        with self.session() as session:
            perms = self._find(session, project_id, user_id, ObjectType.PROJECT)
            session.delete(perms)
            if board_ids:
                session.exec(
                    delete(ObjectPerms).where(
                        ObjectPerms.user_id == user_id,
                        ObjectPerms.object_type == int(ObjectType.BOARD),
                        col(ObjectPerms.object_id).in_(board_ids),
                    )
                )
            session.commit()
