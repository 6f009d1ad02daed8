import logging
from typing import List
from sqlalchemy.orm import Session

from ticketsystem.database import atomic, serialized
from ticketsystem.errors import InvalidSupplyCap
from ticketsystem.models.ticket import Ticket
from ticketsystem.models.transaction import Transaction, TransactionType
from ticketsystem.services.access import AccessControl
from ticketsystem.services.escrow import EscrowService
from ticketsystem.services.event import EventService
from ticketsystem.services.ledger import OwnershipLedger
from ticketsystem.services import notifications as events
from ticketsystem.services.notifications import NotificationService

logger = logging.getLogger(__name__)


class TicketService:
    """
    Ticket lifecycle: Active <-> ForSale -> Used, and Active|ForSale -> Destroyed.

    Every transition runs all of its gates first, then applies its mutations
    and notification inside a single commit.
    """

    @staticmethod
    @serialized
    def mint(db: Session, buyer: str, payment: int) -> int:
        """Primary sale. The whole payment goes to escrow."""
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_not_paused(state)
        AccessControl.require_supply_available(state)
        AccessControl.require_minimum_payment(payment, config.base_price)

        ticket_id = state.minted_count
        with atomic(db):
            db.add(Ticket(
                id=ticket_id,
                owner=buyer,
                price=config.base_price,
                for_sale=False,
                used=False
            ))
            state.minted_count += 1
            EscrowService.deposit(db, state, buyer, payment, TransactionType.MINT, ticket_id)
            OwnershipLedger.credit(db, buyer)
            NotificationService.emit(db, events.TICKET_CREATED, ticket_id, buyer)

        logger.info(f"Ticket {ticket_id} minted for {buyer}")
        return ticket_id

    @staticmethod
    @serialized
    def destroy(db: Session, caller: str, ticket_id: int) -> None:
        """Remove a ticket for good. No refund; the id is never handed out again."""
        state = EventService.get_state(db)
        AccessControl.require_not_paused(state)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_ticket_owner(ticket, caller)

        with atomic(db):
            owner = ticket.owner
            db.delete(ticket)
            OwnershipLedger.debit(db, owner)
            NotificationService.emit(db, events.TICKET_DESTROYED, ticket_id, owner)

        logger.info(f"Ticket {ticket_id} destroyed by {caller}")

    @staticmethod
    @serialized
    def set_price(db: Session, caller: str, ticket_id: int, new_price: int) -> None:
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_not_paused(state)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_ticket_owner(ticket, caller)
        AccessControl.require_not_used(ticket)
        AccessControl.require_within_price_cap(config, new_price)

        with atomic(db):
            ticket.price = new_price
            NotificationService.emit(db, events.TICKET_PRICE_CHANGED, ticket_id, caller, new_price)

        logger.info(f"Ticket {ticket_id} price set to {new_price} by {caller}")

    @staticmethod
    @serialized
    def set_for_sale(db: Session, caller: str, ticket_id: int) -> None:
        state = EventService.get_state(db)
        AccessControl.require_not_paused(state)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_ticket_owner(ticket, caller)
        AccessControl.require_not_used(ticket)

        with atomic(db):
            ticket.for_sale = True
            NotificationService.emit(db, events.TICKET_FOR_SALE, ticket_id, caller)

        logger.info(f"Ticket {ticket_id} listed for sale at {ticket.price}")

    @staticmethod
    @serialized
    def cancel_sale(db: Session, caller: str, ticket_id: int) -> None:
        AccessControl.require_event_created(db)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_ticket_owner(ticket, caller)

        with atomic(db):
            ticket.for_sale = False
            ticket.approved_buyer = None
            NotificationService.emit(db, events.TICKET_SALE_CANCELLED, ticket_id, caller)

        logger.info(f"Ticket {ticket_id} sale cancelled by {caller}")

    @staticmethod
    @serialized
    def approve_buyer(db: Session, caller: str, ticket_id: int, buyer: str) -> None:
        """Name the one identity allowed to buy this ticket. Replaces any earlier approval."""
        state = EventService.get_state(db)
        AccessControl.require_not_paused(state)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_ticket_owner(ticket, caller)

        with atomic(db):
            ticket.approved_buyer = buyer
            NotificationService.emit(db, events.BUYER_APPROVED, ticket_id, buyer)

        logger.info(f"Ticket {ticket_id}: {caller} approved {buyer} as buyer")

    @staticmethod
    @serialized
    def buy_from_holder(db: Session, buyer: str, ticket_id: int, payment: int) -> None:
        """
        Secondary sale at exactly the asking price.
        The transfer fee stays in escrow and the seller is credited the rest.
        """
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_not_paused(state)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_not_used(ticket)
        AccessControl.require_for_sale(ticket)
        AccessControl.require_approved_buyer(ticket, buyer)
        AccessControl.require_exact_payment(payment, ticket.price)

        seller = ticket.owner
        price = ticket.price
        fee = price * config.transfer_fee_percent // 100
        proceeds = price - fee

        with atomic(db):
            ticket.owner = buyer
            ticket.for_sale = False
            ticket.approved_buyer = None
            OwnershipLedger.debit(db, seller)
            OwnershipLedger.credit(db, buyer)
            EscrowService.deposit(db, state, buyer, fee, TransactionType.SALE_FEE, ticket_id)
            OwnershipLedger.accrue_proceeds(db, seller, proceeds)
            db.add(Transaction(
                type=TransactionType.SALE_PROCEEDS,
                identity=seller,
                ticket_id=ticket_id,
                amount=proceeds
            ))
            NotificationService.emit(db, events.TICKET_SOLD, ticket_id, buyer, price)

        logger.info(
            f"Ticket {ticket_id} sold by {seller} to {buyer} for {price} "
            f"(fee {fee}, seller receives {proceeds})"
        )

    @staticmethod
    @serialized
    def mark_used(db: Session, caller: str, ticket_id: int) -> None:
        """Issuer checks a ticket in. Used is terminal for sale, price and transfer."""
        config = EventService.get_config(db)
        AccessControl.require_issuer(config, caller)
        ticket = AccessControl.require_ticket_exists(db, ticket_id)
        AccessControl.require_not_used(ticket)

        with atomic(db):
            ticket.used = True
            ticket.for_sale = False
            ticket.approved_buyer = None
            NotificationService.emit(db, events.TICKET_USED, ticket_id, ticket.owner)

        logger.info(f"Ticket {ticket_id} marked used")

    @staticmethod
    @serialized
    def set_supply_cap(db: Session, caller: str, new_cap: int) -> None:
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_issuer(config, caller)
        if new_cap < 1 or new_cap < state.minted_count:
            raise InvalidSupplyCap()

        with atomic(db):
            state.supply_cap = new_cap
            NotificationService.emit(db, events.SUPPLY_CAP_CHANGED, identity=caller, value=new_cap)

        logger.info(f"Supply cap set to {new_cap} ({state.minted_count} minted)")

    @staticmethod
    def get_ticket(db: Session, ticket_id: int) -> Ticket:
        return AccessControl.require_ticket_exists(db, ticket_id)

    @staticmethod
    def is_used(db: Session, ticket_id: int) -> bool:
        return TicketService.get_ticket(db, ticket_id).used

    @staticmethod
    def is_for_sale(db: Session, ticket_id: int) -> bool:
        return TicketService.get_ticket(db, ticket_id).for_sale

    @staticmethod
    def price_of(db: Session, ticket_id: int) -> int:
        return TicketService.get_ticket(db, ticket_id).price

    @staticmethod
    def max_allowed_price(db: Session, ticket_id: int) -> int:
        config = EventService.get_config(db)
        TicketService.get_ticket(db, ticket_id)
        return config.max_price

    @staticmethod
    def list_for_sale(db: Session) -> List[Ticket]:
        return db.query(Ticket).filter(Ticket.for_sale.is_(True)).order_by(Ticket.id).all()

    @staticmethod
    def list_all(db: Session, skip: int = 0, limit: int = 100) -> List[Ticket]:
        return db.query(Ticket).order_by(Ticket.id).offset(skip).limit(limit).all()
