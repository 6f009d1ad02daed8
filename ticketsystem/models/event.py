from sqlalchemy import Column, Integer, BigInteger, String, Boolean, DateTime
from ticketsystem.models.types import Amount
from sqlalchemy.sql import func
from ticketsystem.database import Base


# Single-event system: one config row and one state row
EVENT_ID = 1


class EventConfig(Base):
    """Immutable event parameters, written once at creation."""

    __tablename__ = "event_config"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    symbol = Column(String(20), nullable=False)
    start_date = Column(BigInteger, nullable=False)
    initial_supply_cap = Column(Integer, nullable=False)
    base_price = Column(Amount, nullable=False)
    price_multiple_cap = Column(Integer, nullable=False)
    transfer_fee_percent = Column(Integer, nullable=False)
    issuer = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    @property
    def max_price(self) -> int:
        return self.base_price * self.price_multiple_cap


class SystemState(Base):
    """Mutable counters, pause gate and escrow balance for the event."""

    __tablename__ = "system_state"

    id = Column(Integer, primary_key=True)
    supply_cap = Column(Integer, nullable=False)
    minted_count = Column(Integer, nullable=False, default=0)
    paused = Column(Boolean, nullable=False, default=False)
    escrow_balance = Column(Amount, nullable=False, default=0)
