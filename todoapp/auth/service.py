"""Session issuing and validation on top of a UserStore.

Tokens are stateless HS256 JWTs carrying the subject id, email and role.
Logging out is purely client side: nothing is revoked on the server.
"""
import logging

from jose import JWTError

from todoapp.errors import AuthError, ConflictError
from todoapp.schemas.user import UserPublic, to_public
from todoapp.stores.base import UserStore
from todoapp.utils.security import hash_password, verify_password, create_access_token, decode_token

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid credentials"


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(
    users: UserStore, email: str, password: str, name: str, *, secret_key: str, expires_minutes: int
) -> tuple[str, UserPublic]:
    email = _normalize_email(email)
    if users.find_by_email(email):
        raise ConflictError("email already registered")
    # role is never taken from the caller
    user = to_public(users.create(email, hash_password(password), name, role="user"))
    logger.info("registered user %s", user.id)
    return create_access_token(user, secret_key, expires_minutes), user


def login_user(
    users: UserStore, email: str, password: str, *, secret_key: str, expires_minutes: int
) -> tuple[str, UserPublic]:
    record = users.find_by_email(_normalize_email(email))
    if not record or not verify_password(password, record.password_hash):
        logger.warning("failed login for %s", email)
        raise AuthError(INVALID_CREDENTIALS)
    user = to_public(record)
    logger.info("user %s logged in", user.id)
    return create_access_token(user, secret_key, expires_minutes), user


def validate_token(users: UserStore, token: str, *, secret_key: str) -> UserPublic | None:
    """Resolve a bearer token to its user, or None when it cannot be trusted.

    Bad signatures, expired tokens and garbage strings all yield None. The
    subject is looked up again so a user removed from the store loses access
    even while their token is still within its lifetime.
    """
    try:
        payload = decode_token(token, secret_key)
    except JWTError:
        return None

    user_id = payload.get("sub")
    if not isinstance(user_id, str):
        return None

    record = users.find_by_id(user_id)
    if record is None:
        return None
    return to_public(record)


def update_profile(users: UserStore, caller: UserPublic, name: str) -> UserPublic:
    """Rename the caller. Records they already own keep the old owner_name."""
    record = users.find_by_id(caller.id)
    if record is None:
        raise AuthError("unauthenticated")
    record.name = name
    return to_public(users.save(record))


def ensure_admin(users: UserStore, email: str, password: str, name: str) -> UserPublic:
    """Create the configured admin account, or promote it if it already exists."""
    email = _normalize_email(email)
    record = users.find_by_email(email)
    if record is None:
        record = users.create(email, hash_password(password), name, role="admin")
        logger.info("created admin account %s", record.id)
    elif record.role != "admin":
        record.role = "admin"
        record = users.save(record)
        logger.info("promoted %s to admin", record.id)
    return to_public(record)
