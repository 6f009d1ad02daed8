from sqlalchemy import Column, Integer, String
from ticketsystem.models.types import Amount
from ticketsystem.database import Base


class Holder(Base):
    """Per-identity ticket count and accrued resale proceeds."""

    __tablename__ = "holders"

    identity = Column(String(255), primary_key=True)
    ticket_count = Column(Integer, nullable=False, default=0)
    proceeds = Column(Amount, nullable=False, default=0)
