
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt
from todoapp.schemas.user import UserPublic

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)

def create_access_token(user: UserPublic, secret_key: str, expires_minutes: int) -> str:
    issued_at = datetime.now(timezone.utc)
    to_encode = {
        "sub": user.id,
        "email": user.email,
        "role": user.role,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)

def decode_token(token: str, secret_key: str) -> dict:
    """Verify signature, expiry and required claims; raises ``jose.JWTError`` on any failure."""
    return jwt.decode(
        token,
        secret_key,
        algorithms=[ALGORITHM],
        options={"require_exp": True, "require_iat": True, "require_sub": True},
    )
