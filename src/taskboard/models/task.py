# models/task.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from taskboard.models.api_response import ApiData, ApiModel
from taskboard.utils import utc_now


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    list_id: int = Field(foreign_key="task_lists.id", index=True)
    title: str = Field(max_length=100)
    description: str = Field(default="")
    position: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TaskCreate(ApiModel):
    title: str = PydanticField(min_length=1, max_length=100)
    description: str = PydanticField(default="", max_length=8000)
    position: Optional[int] = PydanticField(default=None, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Task 1",
                    "description": "some description",
                }
            ]
        }
    }


class TaskUpdate(ApiModel):
    title: Optional[str] = PydanticField(default=None, min_length=1, max_length=100)
    description: Optional[str] = PydanticField(default=None, max_length=8000)
    position: Optional[int] = PydanticField(default=None, ge=0)
    list_id: Optional[int] = None


class TaskRead(ApiModel):
    id: int
    list_id: int
    title: str
    description: str
    position: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, task: Task) -> "TaskRead":
        return cls(
            id=task.id,
            list_id=task.list_id,
            title=task.title,
            description=task.description,
            position=task.position,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskIdData(ApiData):
    task_id: int


class TaskData(ApiData):
    task: TaskRead


class TasksData(ApiData):
    tasks: List[TaskRead]
