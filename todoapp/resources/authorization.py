"""Owner-or-admin rule shared by every resource type."""
import logging
from typing import Callable, TypeVar

from todoapp.errors import ForbiddenError
from todoapp.schemas.records import OwnedRecord
from todoapp.schemas.user import UserPublic

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=OwnedRecord)
T = TypeVar("T")


def can_act(caller: UserPublic, resource_owner_id: str) -> bool:
    return caller.role == "admin" or caller.id == resource_owner_id


def with_ownership_check(caller: UserPublic, record: R, action: Callable[[R], T], kind: str = "record") -> T:
    """Run ``action(record)`` if the caller may act on it, else raise ForbiddenError."""
    if not can_act(caller, record.owner_id):
        logger.warning("user %s denied access to %s %s owned by %s", caller.id, kind, record.id, record.owner_id)
        raise ForbiddenError(f"not allowed to modify this {kind}")
    return action(record)
