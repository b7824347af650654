"""Generic list/create/update/toggle/delete over any owned record type.

Todos and reminders are both served by ``ResourceService``; only the record
class and the store differ. Writes are last-write-wins: there is no locking
or version check between a load and the following save.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Generic
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from todoapp.errors import NotFoundError, ValidationError
from todoapp.resources.authorization import with_ownership_check
from todoapp.schemas.user import UserPublic
from todoapp.stores.base import R, RecordStore

logger = logging.getLogger(__name__)

READ_ONLY_FIELDS = frozenset({"id", "owner_id", "owner_name", "created_at"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResourceService(Generic[R]):
    def __init__(
        self,
        store: RecordStore[R],
        record_type: type[R],
        kind: str,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.store = store
        self.record_type = record_type
        self.kind = kind
        self.clock = clock

    def _load(self, record_id: str) -> R:
        record = self.store.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.kind} not found")
        return record

    def list(self, caller: UserPublic) -> list[R]:
        if caller.role == "admin":
            return self.store.list()
        return self.store.list(owner_id=caller.id)

    def get(self, caller: UserPublic, record_id: str) -> R:
        return with_ownership_check(caller, self._load(record_id), lambda r: r, self.kind)

    def create(self, caller: UserPublic, fields: dict[str, Any]) -> R:
        self._reject_read_only(fields)
        record = self._build({
            **fields,
            "id": uuid4().hex,
            "completed": False,
            "owner_id": caller.id,
            "owner_name": caller.name,
            "created_at": self.clock(),
        })
        self.store.add(record)
        logger.info("user %s created %s %s", caller.id, self.kind, record.id)
        return record

    def update(self, caller: UserPublic, record_id: str, fields: dict[str, Any]) -> R:
        self._reject_read_only(fields)
        if not fields:
            raise ValidationError("nothing to update")

        def apply(record: R) -> R:
            return self.store.save(self._build({**record.model_dump(), **fields}))

        return with_ownership_check(caller, self._load(record_id), apply, self.kind)

    def toggle_complete(self, caller: UserPublic, record_id: str) -> R:
        def flip(record: R) -> R:
            return self.store.save(record.model_copy(update={"completed": not record.completed}))

        return with_ownership_check(caller, self._load(record_id), flip, self.kind)

    def delete(self, caller: UserPublic, record_id: str) -> None:
        with_ownership_check(caller, self._load(record_id), lambda r: self.store.delete(r.id), self.kind)
        logger.info("user %s deleted %s %s", caller.id, self.kind, record_id)

    def _build(self, data: dict[str, Any]) -> R:
        try:
            return self.record_type.model_validate(data)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(p) for p in first["loc"])
            raise ValidationError(f"{field}: {first['msg']}") from exc

    def _reject_read_only(self, fields: dict[str, Any]) -> None:
        blocked = sorted(READ_ONLY_FIELDS & fields.keys())
        if blocked:
            raise ValidationError(f"cannot set {', '.join(blocked)}")
