
from fastapi import APIRouter, Depends
from todoapp.auth.deps import get_current_user, get_settings, get_user_store
from todoapp.auth.service import register_user, login_user, update_profile
from todoapp.config import Settings
from todoapp.schemas.auth import RegisterIn, LoginIn, AuthOut, ProfileUpdate
from todoapp.schemas.user import UserPublic
from todoapp.stores.sql import SqlUserStore

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=AuthOut)
def register(body: RegisterIn, users: SqlUserStore = Depends(get_user_store), settings: Settings = Depends(get_settings)):
    token, user = register_user(
        users, body.email, body.password, body.name,
        secret_key=settings.secret_key,
        expires_minutes=settings.access_token_expire_minutes,
    )
    return AuthOut(token=token, user=user)

@router.post("/login", response_model=AuthOut)
def login(body: LoginIn, users: SqlUserStore = Depends(get_user_store), settings: Settings = Depends(get_settings)):
    token, user = login_user(
        users, body.email, body.password,
        secret_key=settings.secret_key,
        expires_minutes=settings.access_token_expire_minutes,
    )
    return AuthOut(token=token, user=user)

@router.get("/me", response_model=UserPublic)
def me(user: UserPublic = Depends(get_current_user)):
    return user

@router.patch("/me", response_model=UserPublic)
def update_me(body: ProfileUpdate, users: SqlUserStore = Depends(get_user_store), user: UserPublic = Depends(get_current_user)):
    return update_profile(users, user, body.name)

@router.post("/logout")
def logout():
    return {"ok": True}
