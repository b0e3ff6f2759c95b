# models/project.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from taskboard.models.api_response import ApiData, ApiModel
from taskboard.models.permissions import Permission, permission_from_columns
from taskboard.utils import utc_now


class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=50)
    description: str = Field(default="")
    # Nullable: a project may have no default permission configured
    default_read: Optional[bool] = Field(default=None)
    default_write: Optional[bool] = Field(default=None)
    default_admin: Optional[bool] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def default_permissions(self) -> Optional[Permission]:
        return permission_from_columns(self.default_read, self.default_write, self.default_admin)


class ProjectCreate(ApiModel):
    title: str = PydanticField(min_length=1, max_length=50)
    description: str = PydanticField(default="", max_length=2000)
    default_permissions: Optional[Permission] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Test Project",
                    "description": "Some description",
                    "defaultPermissions": {"read": True, "write": False, "admin": False},
                }
            ]
        }
    }


class ProjectUpdate(ApiModel):
    title: Optional[str] = PydanticField(default=None, min_length=1, max_length=50)
    description: Optional[str] = PydanticField(default=None, max_length=2000)
    default_permissions: Optional[Permission] = None


class ProjectRead(ApiModel):
    id: int
    owner_id: int
    title: str
    description: str
    default_permissions: Optional[Permission] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, project: Project) -> "ProjectRead":
        return cls(
            id=project.id,
            owner_id=project.owner_id,
            title=project.title,
            description=project.description,
            default_permissions=project.default_permissions,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectIdData(ApiData):
    project_id: int


class ProjectData(ApiData):
    project: ProjectRead


class ProjectsData(ApiData):
    projects: List[ProjectRead]
