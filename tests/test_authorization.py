"""Tests for the owner-or-admin rule."""
import pytest

from todoapp.errors import ForbiddenError
from todoapp.resources.authorization import can_act, with_ownership_check
from todoapp.schemas.records import ReminderRecord, TodoRecord
from todoapp.schemas.user import UserPublic


@pytest.mark.parametrize(
    ("role", "caller_id", "owner_id", "expected"),
    [
        ("user", "a", "a", True),
        ("user", "a", "b", False),
        ("admin", "a", "b", True),
        ("admin", "a", "a", True),
    ],
)
def test__can_act(role: str, caller_id: str, owner_id: str, expected: bool) -> None:
    caller = UserPublic(id=caller_id, email="x@example.com", name="X", role=role)
    assert can_act(caller, owner_id) is expected


def _records(owner_id: str) -> list:
    common = {
        "id": "r1",
        "text": "Buy milk",
        "owner_id": owner_id,
        "owner_name": "Owner",
        "created_at": "2024-03-01T09:00:00Z",
    }
    return [
        TodoRecord(**common),
        ReminderRecord(**common, due_date="2024-03-02", time="3:00 PM"),
    ]


@pytest.mark.parametrize("record", _records("owner"))
def test__with_ownership_check__same_rule_for_every_record_type(
    record, alice: UserPublic, admin: UserPublic,
) -> None:
    with pytest.raises(ForbiddenError):
        with_ownership_check(alice, record, lambda r: r.id)

    assert with_ownership_check(admin, record, lambda r: r.id) == "r1"

    owner = alice.model_copy(update={"id": "owner"})
    assert with_ownership_check(owner, record, lambda r: r.id) == "r1"


def test__with_ownership_check__does_not_run_action_when_denied(bob: UserPublic) -> None:
    calls = []
    record = _records("someone-else")[0]
    with pytest.raises(ForbiddenError, match="todo"):
        with_ownership_check(bob, record, calls.append, kind="todo")
    assert calls == []
