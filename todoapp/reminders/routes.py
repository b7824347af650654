
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from todoapp.auth.deps import get_db, get_current_user
from todoapp.models.reminder import Reminder
from todoapp.reminders.grouping import group_by_due_date
from todoapp.resources.service import ResourceService
from todoapp.schemas.records import ReminderCreate, ReminderUpdate, ReminderRecord, ReminderGroup
from todoapp.schemas.user import UserPublic
from todoapp.stores.sql import SqlRecordStore

router = APIRouter(prefix="/reminders", tags=["reminders"])

def get_reminder_service(db: Session = Depends(get_db)) -> ResourceService[ReminderRecord]:
    return ResourceService(SqlRecordStore(db, Reminder, ReminderRecord), ReminderRecord, "reminder")

def _today():
    return datetime.now(timezone.utc).date()

@router.get("", response_model=list[ReminderRecord])
def list_reminders(reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    return reminders.list(user)

@router.get("/grouped", response_model=list[ReminderGroup])
def grouped_reminders(reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    return group_by_due_date(reminders.list(user), _today())

@router.post("", response_model=ReminderRecord)
def create_reminder(body: ReminderCreate, reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    fields = body.model_dump()
    if fields["due_date"] is None:
        fields["due_date"] = _today()
    return reminders.create(user, fields)

@router.get("/{reminder_id}", response_model=ReminderRecord)
def get_reminder(reminder_id: str, reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    return reminders.get(user, reminder_id)

@router.patch("/{reminder_id}/toggle", response_model=ReminderRecord)
def toggle_reminder(reminder_id: str, reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    return reminders.toggle_complete(user, reminder_id)

@router.patch("/{reminder_id}", response_model=ReminderRecord)
def update_reminder(reminder_id: str, body: ReminderUpdate, reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    return reminders.update(user, reminder_id, body.model_dump())

@router.delete("/{reminder_id}")
def delete_reminder(reminder_id: str, reminders: ResourceService = Depends(get_reminder_service), user: UserPublic = Depends(get_current_user)):
    reminders.delete(user, reminder_id)
    return {"success": True}
