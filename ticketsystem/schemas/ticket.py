from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class MintRequest(BaseModel):
    payment: int = Field(..., ge=0)


class MintResponse(BaseModel):
    ticket_id: int


class PriceUpdate(BaseModel):
    price: int = Field(..., ge=0)


class BuyerApproval(BaseModel):
    buyer: str = Field(..., min_length=1, max_length=255)


class PurchaseRequest(BaseModel):
    payment: int = Field(..., ge=0)


class TicketResponse(BaseModel):
    id: int
    owner: str
    price: int
    for_sale: bool
    used: bool
    approved_buyer: Optional[str] = None
    minted_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OwnerResponse(BaseModel):
    ticket_id: int
    owner: str


class MaxPriceResponse(BaseModel):
    ticket_id: int
    max_price: int


class HolderResponse(BaseModel):
    identity: str
    balance: int
    proceeds: int


class OwnershipResponse(BaseModel):
    identity: str
    ticket_id: int
    is_owner: bool
