
from fastapi import Request, Depends
from sqlalchemy.orm import Session
from todoapp.config import Settings
from todoapp.errors import AuthError
from todoapp.auth.service import validate_token
from todoapp.schemas.user import UserPublic
from todoapp.stores.sql import SqlUserStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_user_store(db: Session = Depends(get_db)) -> SqlUserStore:
    return SqlUserStore(db)

def _bearer_token(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return None

def get_current_user(
    request: Request,
    users: SqlUserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> UserPublic:
    token = _bearer_token(request)
    if not token:
        raise AuthError("unauthenticated")

    user = validate_token(users, token, secret_key=settings.secret_key)
    if user is None:
        raise AuthError("unauthenticated")
    return user
