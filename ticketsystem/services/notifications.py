import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ticketsystem.models.notification import Notification

logger = logging.getLogger(__name__)

TICKET_CREATED = "TicketCreated"
TICKET_DESTROYED = "TicketDestroyed"
TICKET_PRICE_CHANGED = "TicketPriceChanged"
TICKET_FOR_SALE = "TicketForSale"
TICKET_SALE_CANCELLED = "TicketSaleCancelled"
TICKET_SOLD = "TicketSold"
TICKET_USED = "TicketUsed"
BUYER_APPROVED = "BuyerApproved"
BALANCE_WITHDRAWN = "BalanceWithdrawn"
PROCEEDS_CLAIMED = "ProceedsClaimed"
SUPPLY_CAP_CHANGED = "SupplyCapChanged"
PAUSED = "Paused"
UNPAUSED = "Unpaused"


class NotificationService:
    @staticmethod
    def emit(
        db: Session,
        name: str,
        ticket_id: Optional[int] = None,
        identity: Optional[str] = None,
        value: Optional[int] = None
    ) -> Notification:
        """
        Record a notification as part of the current operation.
        It becomes visible only when the operation commits.
        """
        notification = Notification(
            name=name,
            ticket_id=ticket_id,
            identity=identity,
            value=value
        )
        db.add(notification)
        return notification

    @staticmethod
    def recent(db: Session, limit: int = 50, name: Optional[str] = None) -> List[Notification]:
        query = db.query(Notification)
        if name:
            query = query.filter(Notification.name == name)
        return query.order_by(Notification.id.desc()).limit(limit).all()
