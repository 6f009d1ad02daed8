from ticketsystem.schemas.auth import TokenData
from ticketsystem.schemas.ticket import (
    MintRequest, MintResponse, PriceUpdate, BuyerApproval, PurchaseRequest,
    TicketResponse, OwnerResponse, MaxPriceResponse, HolderResponse, OwnershipResponse
)
from ticketsystem.schemas.event import (
    EventResponse, EventStatusResponse, SupplyCapUpdate, AmountResponse, NotificationResponse
)

__all__ = [
    "TokenData",
    "MintRequest", "MintResponse", "PriceUpdate", "BuyerApproval", "PurchaseRequest",
    "TicketResponse", "OwnerResponse", "MaxPriceResponse", "HolderResponse", "OwnershipResponse",
    "EventResponse", "EventStatusResponse", "SupplyCapUpdate", "AmountResponse",
    "NotificationResponse"
]
