# routers/dependencies.py
from fastapi import Request
from fastapi.responses import JSONResponse

from taskboard.models.api_response import ApiResponse
from taskboard.services.service import Service


def get_service(request: Request) -> Service:
    return request.app.state.service


def send(response: ApiResponse) -> JSONResponse:
    """Render an envelope with the HTTP status mirroring its code."""
    return JSONResponse(status_code=response.code, content=response.to_dict())
