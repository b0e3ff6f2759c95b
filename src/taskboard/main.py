# taskboard/main.py
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from loguru import logger
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException

from taskboard.config import Settings
from taskboard.database import build_engine, init_db
from taskboard.logging_setup import configure_logging
from taskboard.models.api_response import ApiResponse
from taskboard.repositories.repository import Repository
from taskboard.routers import (
    board_perms_router,
    board_router,
    health_router,
    label_router,
    project_perms_router,
    project_router,
    task_list_router,
    task_router,
    user_router,
)
from taskboard.routers.dependencies import send
from taskboard.services.service import Service

API_PREFIX = "/api/v1"


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    engine = engine or build_engine(settings)
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(title="Taskboard API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.service = Service(Repository(engine), settings)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return send(ApiResponse.error(exc.status_code, str(exc.detail)))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        logger.debug(f"Validation failed for {request.method} {request.url.path}: {errors}")
        return send(ApiResponse.error(status.HTTP_400_BAD_REQUEST, errors))

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    # Include routers
    for module in (
        health_router,
        user_router,
        project_router,
        project_perms_router,
        board_router,
        board_perms_router,
        task_list_router,
        task_router,
        label_router,
    ):
        app.include_router(module.router, prefix=API_PREFIX)

    return app


def run() -> None:
    settings = Settings.from_env()
    uvicorn.run("taskboard.main:create_app", factory=True, host=settings.host, port=settings.port)
