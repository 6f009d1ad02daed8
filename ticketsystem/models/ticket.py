from sqlalchemy import Column, Integer, String, Boolean, DateTime
from ticketsystem.models.types import Amount
from sqlalchemy.sql import func
from ticketsystem.database import Base


class Ticket(Base):
    __tablename__ = "tickets"

    # Assigned from SystemState.minted_count, never reused after destroy
    id = Column(Integer, primary_key=True, autoincrement=False)
    owner = Column(String(255), nullable=False, index=True)
    price = Column(Amount, nullable=False)
    for_sale = Column(Boolean, nullable=False, default=False)
    used = Column(Boolean, nullable=False, default=False)
    approved_buyer = Column(String(255), nullable=True)
    minted_at = Column(DateTime, server_default=func.now())
