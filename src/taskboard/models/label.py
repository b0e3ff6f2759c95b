# models/label.py
from typing import List, Optional

from pydantic import Field as PydanticField
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from taskboard.models.api_response import ApiData, ApiModel


class Label(SQLModel, table=True):
    __tablename__ = "labels"

    id: Optional[int] = Field(default=None, primary_key=True)
    board_id: int = Field(foreign_key="boards.id", index=True)
    name: str = Field(max_length=32)
    color: int = Field(default=0)


class TaskLabel(SQLModel, table=True):
    __tablename__ = "task_labels"
    __table_args__ = (
        UniqueConstraint("task_id", "label_id", name="uq_task_label"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    task_id: int = Field(foreign_key="tasks.id", index=True)
    label_id: int = Field(foreign_key="labels.id", index=True)


class LabelCreate(ApiModel):
    name: str = PydanticField(min_length=1, max_length=32)
    color: int = PydanticField(default=0, ge=0)


class LabelUpdate(ApiModel):
    name: Optional[str] = PydanticField(default=None, min_length=1, max_length=32)
    color: Optional[int] = PydanticField(default=None, ge=0)


class LabelRead(ApiModel):
    id: int
    board_id: int
    name: str
    color: int

    @classmethod
    def from_model(cls, label: Label) -> "LabelRead":
        return cls(id=label.id, board_id=label.board_id, name=label.name, color=label.color)


class LabelIdData(ApiData):
    label_id: int


class LabelData(ApiData):
    label: LabelRead


class LabelsData(ApiData):
    labels: List[LabelRead]


class TaskLabelIdData(ApiData):
    task_label_id: int
