"""Gate checks composed at the top of every ticket operation.

Each gate either returns quietly or raises the specific error for the
violation. Gates never mutate state, so a failing gate leaves the
operation with no side effects.
"""
from typing import Optional
from sqlalchemy.orm import Session

from ticketsystem.errors import (
    EventNotCreated, InsufficientPayment, NotForSale, OverpaymentRejected, PriceCapExceeded,
    SupplyExhausted, SystemPaused, TicketNotFound, Unauthorized, UsedTicket,
    ValidationError
)
from ticketsystem.models.event import EVENT_ID, EventConfig, SystemState
from ticketsystem.models.ticket import Ticket


class AccessControl:
    @staticmethod
    def require_event_created(db: Session) -> None:
        if db.get(SystemState, EVENT_ID) is None:
            raise EventNotCreated()

    @staticmethod
    def require_issuer(config: EventConfig, caller: Optional[str]) -> None:
        if caller is None or caller != config.issuer:
            raise Unauthorized()

    @staticmethod
    def require_ticket_exists(db: Session, ticket_id: int) -> Ticket:
        ticket = db.get(Ticket, ticket_id)
        if ticket is None:
            raise TicketNotFound()
        return ticket

    @staticmethod
    def require_ticket_owner(ticket: Ticket, caller: Optional[str]) -> None:
        if caller is None or caller != ticket.owner:
            raise Unauthorized()

    @staticmethod
    def require_supply_available(state: SystemState) -> None:
        if state.minted_count >= state.supply_cap:
            raise SupplyExhausted()

    @staticmethod
    def require_not_used(ticket: Ticket) -> None:
        if ticket.used:
            raise UsedTicket()

    @staticmethod
    def require_within_price_cap(config: EventConfig, price: int) -> None:
        if price < 0:
            raise ValidationError("price must not be negative")
        if price > config.max_price:
            raise PriceCapExceeded()

    @staticmethod
    def require_not_paused(state: SystemState) -> None:
        if state.paused:
            raise SystemPaused()

    @staticmethod
    def require_for_sale(ticket: Ticket) -> None:
        if not ticket.for_sale:
            raise NotForSale()

    @staticmethod
    def require_approved_buyer(ticket: Ticket, buyer: Optional[str]) -> None:
        """Only the single buyer approved by the holder may purchase."""
        if buyer is None or ticket.approved_buyer is None or ticket.approved_buyer != buyer:
            raise Unauthorized()

    @staticmethod
    def require_minimum_payment(payment: int, amount: int) -> None:
        if payment < amount:
            raise InsufficientPayment()

    @staticmethod
    def require_exact_payment(payment: int, amount: int) -> None:
        if payment < amount:
            raise InsufficientPayment()
        if payment > amount:
            raise OverpaymentRejected()
