# routers/board_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.board import BoardCreate, BoardUpdate
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/projects/{project_id}/boards", tags=["Boards"])


@router.post("")
def create_board(project_id: int, board: BoardCreate, user_id: int = Depends(get_current_user_id),
                 service: Service = Depends(get_service)):
    return send(service.board.create(user_id, project_id, board))


@router.get("")
def get_all_boards(project_id: int, user_id: int = Depends(get_current_user_id),
                   service: Service = Depends(get_service)):
    return send(service.board.get_all(user_id, project_id))


@router.get("/{board_id}")
def get_board(project_id: int, board_id: int, user_id: int = Depends(get_current_user_id),
              service: Service = Depends(get_service)):
    return send(service.board.get_by_id(user_id, project_id, board_id))


@router.put("/{board_id}")
def update_board(project_id: int, board_id: int, board: BoardUpdate, user_id: int = Depends(get_current_user_id),
                 service: Service = Depends(get_service)):
    return send(service.board.update(user_id, project_id, board_id, board))


@router.delete("/{board_id}")
def delete_board(project_id: int, board_id: int, user_id: int = Depends(get_current_user_id),
                 service: Service = Depends(get_service)):
    return send(service.board.delete(user_id, project_id, board_id))
