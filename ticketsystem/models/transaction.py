from sqlalchemy import Column, Integer, String, DateTime, Enum
from ticketsystem.models.types import Amount
from sqlalchemy.sql import func
from ticketsystem.database import Base
import enum


class TransactionType(str, enum.Enum):
    MINT = "mint"
    SALE_FEE = "sale_fee"
    SALE_PROCEEDS = "sale_proceeds"
    WITHDRAWAL = "withdrawal"
    PROCEEDS_CLAIM = "proceeds_claim"


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(Enum(TransactionType), nullable=False)
    identity = Column(String(255), nullable=False)
    ticket_id = Column(Integer, nullable=True)
    amount = Column(Amount, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
