# services/base.py
from functools import wraps
from typing import Callable, TypeVar

from fastapi import status
from loguru import logger

from taskboard.exceptions import AlreadyExistsError, ApiError, NotFoundError, RepositoryError
from taskboard.models.api_response import ApiResponse
from taskboard.models.permissions import Permission

T = TypeVar("T")


def handle_api_errors(func: Callable[..., ApiResponse]) -> Callable[..., ApiResponse]:
    """Turn an ApiError raised by a service step into an error envelope."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> ApiResponse:
        try:
            return func(*args, **kwargs)
        except ApiError as e:
            return ApiResponse.error(e.code, e.message)

    return wrapper


def fetch(call: Callable[[], T], what: str, missing_code: int = status.HTTP_404_NOT_FOUND) -> T:
    """
    Run a repository read. NotFoundError becomes missing_code (404 unless the
    caller says otherwise), any other repository failure becomes 500.
    """
    try:
        return call()
    except NotFoundError as e:
        logger.debug(f"{what}: {e}")
        raise ApiError(missing_code, f"{what} not found")
    except RepositoryError as e:
        logger.error(f"{what}: {e}")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to load {what.lower()}")


def persist(call: Callable[[], T], what: str) -> T:
    """
    Run a repository write. A uniqueness violation becomes 409, a vanished
    row 404 and any other repository failure 500.
    """
    try:
        return call()
    except AlreadyExistsError as e:
        logger.debug(f"{what}: {e}")
        raise ApiError(status.HTTP_409_CONFLICT, f"{what} already exists")
    except NotFoundError as e:
        logger.debug(f"{what}: {e}")
        raise ApiError(status.HTTP_404_NOT_FOUND, f"{what} not found")
    except RepositoryError as e:
        logger.error(f"{what}: {e}")
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to save {what.lower()}")


def require(permission: Permission, flag: str, message: str) -> None:
    if not getattr(permission, flag):
        logger.debug(f"Permission denied, missing '{flag}': {message}")
        raise ApiError(status.HTTP_403_FORBIDDEN, message)


def validate_permission(permission: Permission) -> None:
    if permission.is_malformed():
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Permissions are set incorrectly: admin requires write")
