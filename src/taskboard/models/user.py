# models/user.py
from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field as PydanticField
from sqlmodel import Field, SQLModel

from taskboard.models.api_response import ApiData, ApiModel
from taskboard.utils import utc_now


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    nickname: str = Field(unique=True, index=True, max_length=32)
    email: str = Field(unique=True, index=True)
    password_hash: str
    first_name: Optional[str] = Field(default=None)
    last_name: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)


class SignUpForm(ApiModel):
    nickname: str = PydanticField(min_length=1, max_length=32)
    email: EmailStr
    password: str = PydanticField(min_length=4, max_length=128)
    first_name: Optional[str] = PydanticField(default=None, max_length=64)
    last_name: Optional[str] = PydanticField(default=None, max_length=64)
    phone: Optional[str] = PydanticField(default=None, max_length=32)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "nickname": "alex",
                    "email": "alex@example.com",
                    "password": "qwerty",
                    "firstName": "Alex",
                }
            ]
        }
    }


class SignInForm(ApiModel):
    nickname: str
    password: str


class UserRead(ApiModel):
    id: int
    nickname: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_model(cls, user: User) -> "UserRead":
        return cls(
            id=user.id,
            nickname=user.nickname,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
        )


class UserIdData(ApiData):
    uid: int


class TokenData(ApiData):
    token: str


class UserData(ApiData):
    user: UserRead


class UsersData(ApiData):
    users: List[UserRead]
