# routers/user_router.py
from fastapi import APIRouter, Depends

from taskboard.authentication import get_current_user_id
from taskboard.models.user import SignInForm, SignUpForm
from taskboard.routers.dependencies import get_service, send
from taskboard.services.service import Service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/signup")
def sign_up(form: SignUpForm, service: Service = Depends(get_service)):
    return send(service.user.create(form))


@router.post("/signin")
def sign_in(form: SignInForm, service: Service = Depends(get_service)):
    return send(service.user.generate_token(form))


@router.get("/")
def get_current_user(user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.user.get_by_id(user_id))


@router.get("/all")
def get_all_users(user_id: int = Depends(get_current_user_id), service: Service = Depends(get_service)):
    return send(service.user.get_all())
