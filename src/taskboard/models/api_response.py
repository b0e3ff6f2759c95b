# models/api_response.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from fastapi import status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

STATUS_MESSAGES = {
    status.HTTP_200_OK: "OK",
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}


class ApiModel(BaseModel):
    """Base for every camelCase request and response body."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiData(ApiModel):
    """Base for envelope payloads; an instance without fields renders as {}."""


class EmptyData(ApiData):
    pass


@dataclass
class ApiResponse:
    code: int
    message: str
    data: ApiData = field(default_factory=EmptyData)

    @classmethod
    def ok(cls, data: Optional[ApiData] = None) -> "ApiResponse":
        return cls(
            code=status.HTTP_200_OK,
            message=STATUS_MESSAGES[status.HTTP_200_OK],
            data=data if data is not None else EmptyData(),
        )

    @classmethod
    def error(cls, code: int, message: Optional[str] = None) -> "ApiResponse":
        return cls(code=code, message=message or STATUS_MESSAGES.get(code, "Error"))

    @property
    def is_ok(self) -> bool:
        return self.code == status.HTTP_200_OK

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data.model_dump(mode="json", by_alias=True),
        }
