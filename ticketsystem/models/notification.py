from sqlalchemy import Column, Integer, String, DateTime
from ticketsystem.models.types import Amount
from sqlalchemy.sql import func
from ticketsystem.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, index=True)
    ticket_id = Column(Integer, nullable=True)
    identity = Column(String(255), nullable=True)
    value = Column(Amount, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
