"""Today / Tomorrow / Upcoming buckets for the reminders view.

Past-due reminders belong to no bucket and empty buckets are left out.
"""
from datetime import date, timedelta

from todoapp.schemas.records import ReminderGroup, ReminderRecord

BUCKETS = ("Today", "Tomorrow", "Upcoming")


def bucket_for(due: date, today: date) -> str | None:
    if due < today:
        return None
    if due == today:
        return "Today"
    if due == today + timedelta(days=1):
        return "Tomorrow"
    return "Upcoming"


def group_by_due_date(reminders: list[ReminderRecord], today: date) -> list[ReminderGroup]:
    groups = {title: [] for title in BUCKETS}
    for reminder in reminders:
        bucket = bucket_for(reminder.due_date, today)
        if bucket is not None:
            groups[bucket].append(reminder)
    return [ReminderGroup(title=title, reminders=groups[title]) for title in BUCKETS if groups[title]]
