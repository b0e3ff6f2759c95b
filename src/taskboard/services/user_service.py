# services/user_service.py
from fastapi import status
from loguru import logger

from taskboard.authentication import create_access_token, decode_access_token
from taskboard.config import Settings
from taskboard.exceptions import ApiError
from taskboard.models.api_response import ApiResponse
from taskboard.models.user import (
    SignInForm,
    SignUpForm,
    TokenData,
    User,
    UserData,
    UserIdData,
    UserRead,
    UsersData,
)
from taskboard.repositories.user_repository import UserRepository
from taskboard.services.base import fetch, handle_api_errors, persist
from taskboard.utils import hash_password, verify_password


class UserService:
    def __init__(self, user_repository: UserRepository, settings: Settings):
        self.user_repository = user_repository
        self.settings = settings

    @handle_api_errors
    def create(self, form: SignUpForm) -> ApiResponse:
        user = User(
            nickname=form.nickname,
            email=form.email,
            password_hash=hash_password(form.password),
            first_name=form.first_name,
            last_name=form.last_name,
            phone=form.phone,
        )
        user_id = persist(lambda: self.user_repository.create(user), "User")
        logger.info(f"User {form.nickname!r} signed up with id {user_id}")
        return ApiResponse.ok(UserIdData(uid=user_id))

    @handle_api_errors
    def generate_token(self, form: SignInForm) -> ApiResponse:
        user = fetch(
            lambda: self.user_repository.get_by_nickname(form.nickname),
            "User",
            missing_code=status.HTTP_401_UNAUTHORIZED,
        )
        if not verify_password(form.password, user.password_hash):
            logger.debug(f"Wrong password for {form.nickname!r}")
            raise ApiError(status.HTTP_401_UNAUTHORIZED, "Invalid nickname or password")
        return ApiResponse.ok(TokenData(token=create_access_token(user.id, self.settings)))

    def parse_token(self, token: str) -> int:
        """Return the user id carried by a token; raises InvalidTokenError."""
        return decode_access_token(token, self.settings)

    @handle_api_errors
    def get_by_id(self, user_id: int) -> ApiResponse:
        user = fetch(lambda: self.user_repository.get_by_id(user_id), "User")
        return ApiResponse.ok(UserData(user=UserRead.from_model(user)))

    @handle_api_errors
    def get_all(self) -> ApiResponse:
        users = fetch(self.user_repository.get_all, "Users")
        return ApiResponse.ok(UsersData(users=[UserRead.from_model(user) for user in users]))
