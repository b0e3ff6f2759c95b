# models/permissions.py
from enum import IntEnum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ObjectType(IntEnum):
    PROJECT = 1
    BOARD = 2


class Permission(SQLModel):
    read: bool = False
    write: bool = False
    admin: bool = False

    def is_empty(self) -> bool:
        return not (self.read or self.write or self.admin)

    def is_malformed(self) -> bool:
        # admin without write
        return self.admin and not self.write


FULL_PERMISSION = Permission(read=True, write=True, admin=True)


class ObjectPerms(SQLModel, table=True):
    __tablename__ = "object_perms"
    __table_args__ = (
        UniqueConstraint("object_id", "user_id", "object_type", name="uq_object_perms"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    object_id: int = Field(index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    object_type: int = Field(index=True)
    read: bool = Field(default=False)
    write: bool = Field(default=False)
    admin: bool = Field(default=False)

    @property
    def permission(self) -> Permission:
        return Permission(read=self.read, write=self.write, admin=self.admin)


def default_permission_columns(permission: Optional[Permission]) -> dict:
    """
    Flatten an optional default permission into the nullable default_* columns
    shared by projects and boards.
    """
    if permission is None:
        return {"default_read": None, "default_write": None, "default_admin": None}
    return {
        "default_read": permission.read,
        "default_write": permission.write,
        "default_admin": permission.admin,
    }


def permission_from_columns(read: Optional[bool], write: Optional[bool], admin: Optional[bool]) -> Optional[Permission]:
    if read is None or write is None or admin is None:
        return None
    return Permission(read=read, write=write, admin=admin)
