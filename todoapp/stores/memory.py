"""Dict-backed stores. Each instance owns its data; nothing is shared between instances."""
from typing import Generic
from uuid import uuid4

from todoapp.schemas.user import Role, UserRecord
from todoapp.stores.base import R


class InMemoryUserStore:
    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}

    def find_by_email(self, email: str) -> UserRecord | None:
        for user in self._users.values():
            if user.email == email:
                return user.model_copy()
        return None

    def find_by_id(self, user_id: str) -> UserRecord | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def create(self, email: str, password_hash: str, name: str, role: Role = "user") -> UserRecord:
        user = UserRecord(id=uuid4().hex, email=email, name=name, role=role, password_hash=password_hash)
        self._users[user.id] = user
        return user.model_copy()

    def save(self, user: UserRecord) -> UserRecord:
        self._users[user.id] = user.model_copy()
        return user


class InMemoryRecordStore(Generic[R]):
    def __init__(self) -> None:
        self._records: dict[str, R] = {}

    def list(self, owner_id: str | None = None) -> list[R]:
        records = [
            r.model_copy() for r in self._records.values()
            if owner_id is None or r.owner_id == owner_id
        ]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records

    def get(self, record_id: str) -> R | None:
        record = self._records.get(record_id)
        return record.model_copy() if record else None

    def add(self, record: R) -> R:
        self._records[record.id] = record.model_copy()
        return record

    def save(self, record: R) -> R:
        self._records[record.id] = record.model_copy()
        return record

    def delete(self, record_id: str) -> None:
        self._records.pop(record_id, None)
