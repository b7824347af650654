"""Storage contracts for users and owned records.

Stores are dumb keyed collections: they never check uniqueness or
ownership, that is the job of the services in front of them.
"""
from typing import Protocol, TypeVar

from todoapp.schemas.records import OwnedRecord
from todoapp.schemas.user import Role, UserRecord

R = TypeVar("R", bound=OwnedRecord)


class UserStore(Protocol):
    def find_by_email(self, email: str) -> UserRecord | None: ...

    def find_by_id(self, user_id: str) -> UserRecord | None: ...

    def create(self, email: str, password_hash: str, name: str, role: Role = "user") -> UserRecord: ...

    def save(self, user: UserRecord) -> UserRecord: ...


class RecordStore(Protocol[R]):
    def list(self, owner_id: str | None = None) -> list[R]:
        """Records newest first, optionally restricted to one owner."""
        ...

    def get(self, record_id: str) -> R | None: ...

    def add(self, record: R) -> R: ...

    def save(self, record: R) -> R: ...

    def delete(self, record_id: str) -> None: ...
