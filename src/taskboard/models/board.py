# models/board.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from taskboard.models.api_response import ApiData, ApiModel
from taskboard.models.permissions import Permission, permission_from_columns
from taskboard.utils import utc_now


class Board(SQLModel, table=True):
    __tablename__ = "boards"

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    owner_id: int = Field(foreign_key="users.id")
    title: str = Field(max_length=50)
    default_read: Optional[bool] = Field(default=None)
    default_write: Optional[bool] = Field(default=None)
    default_admin: Optional[bool] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def default_permissions(self) -> Optional[Permission]:
        return permission_from_columns(self.default_read, self.default_write, self.default_admin)


class BoardCreate(ApiModel):
    title: str = PydanticField(min_length=1, max_length=50)
    default_permissions: Optional[Permission] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Sprint board",
                    "defaultPermissions": {"read": True, "write": True, "admin": False},
                }
            ]
        }
    }


class BoardUpdate(ApiModel):
    title: Optional[str] = PydanticField(default=None, min_length=1, max_length=50)
    default_permissions: Optional[Permission] = None


class BoardRead(ApiModel):
    id: int
    project_id: int
    owner_id: int
    title: str
    default_permissions: Optional[Permission] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, board: Board) -> "BoardRead":
        return cls(
            id=board.id,
            project_id=board.project_id,
            owner_id=board.owner_id,
            title=board.title,
            default_permissions=board.default_permissions,
            created_at=board.created_at,
            updated_at=board.updated_at,
        )


class BoardIdData(ApiData):
    board_id: int


class BoardData(ApiData):
    board: BoardRead


class BoardsData(ApiData):
    boards: List[BoardRead]
