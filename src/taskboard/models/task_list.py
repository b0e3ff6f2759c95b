# models/task_list.py
from typing import List, Optional

from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from taskboard.models.api_response import ApiData, ApiModel


class TaskList(SQLModel, table=True):
    __tablename__ = "task_lists"

    id: Optional[int] = Field(default=None, primary_key=True)
    board_id: int = Field(foreign_key="boards.id", index=True)
    title: str = Field(max_length=32)
    position: int = Field(default=0)


class TaskListCreate(ApiModel):
    title: str = PydanticField(min_length=1, max_length=32)
    position: Optional[int] = PydanticField(default=None, ge=0)


class TaskListUpdate(ApiModel):
    title: Optional[str] = PydanticField(default=None, min_length=1, max_length=32)
    position: Optional[int] = PydanticField(default=None, ge=0)


class TaskListRead(ApiModel):
    id: int
    board_id: int
    title: str
    position: int

    @classmethod
    def from_model(cls, task_list: TaskList) -> "TaskListRead":
        return cls(
            id=task_list.id,
            board_id=task_list.board_id,
            title=task_list.title,
            position=task_list.position,
        )


class ListIdData(ApiData):
    list_id: int


class ListData(ApiData):
    task_list: TaskListRead = PydanticField(alias="list")


class ListsData(ApiData):
    lists: List[TaskListRead]
