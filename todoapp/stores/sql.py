"""SQLAlchemy-backed stores used by the HTTP service."""
import logging
from datetime import datetime, timezone
from typing import Generic
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todoapp.errors import ConflictError, NotFoundError
from todoapp.models.user import User
from todoapp.schemas.user import Role, UserRecord
from todoapp.stores.base import R

logger = logging.getLogger(__name__)


def _aware(value: datetime) -> datetime:
    # sqlite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlUserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> UserRecord | None:
        row = self.db.query(User).filter(User.email == email).first()
        return UserRecord.model_validate(row) if row else None

    def find_by_id(self, user_id: str) -> UserRecord | None:
        row = self.db.get(User, user_id)
        return UserRecord.model_validate(row) if row else None

    def create(self, email: str, password_hash: str, name: str, role: Role = "user") -> UserRecord:
        row = User(id=uuid4().hex, email=email, name=name, role=role, password_hash=password_hash)
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # lost a race against another registration of the same email
            logger.warning("duplicate registration for %s", email)
            raise ConflictError("email already registered")
        return UserRecord.model_validate(row)

    def save(self, user: UserRecord) -> UserRecord:
        row = self.db.get(User, user.id)
        row.name = user.name
        row.role = user.role
        row.password_hash = user.password_hash
        self.db.commit()
        return UserRecord.model_validate(row)


class SqlRecordStore(Generic[R]):
    """Maps one ORM table to one record type."""

    def __init__(self, db: Session, model, record_type: type[R]) -> None:
        self.db = db
        self.model = model
        self.record_type = record_type

    def _to_record(self, row) -> R:
        record = self.record_type.model_validate(row)
        record.created_at = _aware(record.created_at)
        return record

    def list(self, owner_id: str | None = None) -> list[R]:
        stmt = select(self.model)
        if owner_id is not None:
            stmt = stmt.where(self.model.owner_id == owner_id)
        stmt = stmt.order_by(self.model.created_at.desc())
        return [self._to_record(row) for row in self.db.scalars(stmt)]

    def get(self, record_id: str) -> R | None:
        row = self.db.get(self.model, record_id)
        return self._to_record(row) if row else None

    def add(self, record: R) -> R:
        row = self.model(**record.model_dump())
        self.db.add(row)
        self.db.commit()
        return record

    def save(self, record: R) -> R:
        row = self.db.get(self.model, record.id)
        if row is None:
            raise NotFoundError("record no longer exists")
        for field, value in record.model_dump(exclude={"id", "owner_id", "created_at"}).items():
            setattr(row, field, value)
        self.db.commit()
        return record

    def delete(self, record_id: str) -> None:
        row = self.db.get(self.model, record_id)
        if row is not None:
            self.db.delete(row)
            self.db.commit()
