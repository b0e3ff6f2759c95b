# taskboard/authentication.py
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from taskboard.config import Settings
from taskboard.exceptions import InvalidTokenError

# Define bearer security scheme
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: int, settings: Settings) -> str:
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=settings.token_ttl_minutes)
    claims = {"sub": str(user_id), "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    try:
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return int(claims["sub"])
    except (JWTError, KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid or expired token") from e


def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
) -> int:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing token",
        )
    try:
        return request.app.state.service.user.parse_token(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
