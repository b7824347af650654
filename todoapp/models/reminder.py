
from sqlalchemy import Column, String, Text, Boolean, Date, DateTime, ForeignKey
from todoapp.db.session import Base

class Reminder(Base):
    __tablename__ = "reminders"
    id = Column(String(32), primary_key=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    owner_id = Column(String(32), ForeignKey("users.id"), index=True, nullable=False)
    owner_name = Column(String(120), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    due_date = Column(Date, nullable=False, index=True)
    time = Column(String(40), nullable=False)
    category = Column(String(60), nullable=False, default="Personal")
