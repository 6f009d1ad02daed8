from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class EventResponse(BaseModel):
    name: str
    symbol: str
    start_date: int
    initial_supply_cap: int
    base_price: int
    price_multiple_cap: int
    transfer_fee_percent: int
    issuer: str
    max_price: int

    class Config:
        from_attributes = True


class EventStatusResponse(BaseModel):
    supply_cap: int
    minted_count: int
    paused: bool
    escrow_balance: int

    class Config:
        from_attributes = True


class SupplyCapUpdate(BaseModel):
    supply_cap: int = Field(..., ge=1)


class AmountResponse(BaseModel):
    amount: int


class NotificationResponse(BaseModel):
    id: int
    name: str
    ticket_id: Optional[int]
    identity: Optional[str]
    value: Optional[int]
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
