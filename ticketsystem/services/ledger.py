import logging
from typing import List
from sqlalchemy.orm import Session

from ticketsystem.errors import LedgerInvariantError
from ticketsystem.models.holder import Holder
from ticketsystem.models.ticket import Ticket
from ticketsystem.services.access import AccessControl

logger = logging.getLogger(__name__)


class OwnershipLedger:
    """
    Per-identity ticket counts, kept equal to the number of ticket records
    each identity owns. Only ticket transitions call the mutators, and they
    never commit on their own.
    """

    @staticmethod
    def _get_or_create(db: Session, identity: str) -> Holder:
        holder = db.get(Holder, identity)
        if holder is None:
            holder = Holder(identity=identity, ticket_count=0, proceeds=0)
            db.add(holder)
            db.flush()
        return holder

    @staticmethod
    def credit(db: Session, identity: str) -> int:
        holder = OwnershipLedger._get_or_create(db, identity)
        holder.ticket_count += 1
        return holder.ticket_count

    @staticmethod
    def debit(db: Session, identity: str) -> int:
        holder = db.get(Holder, identity)
        if holder is None or holder.ticket_count <= 0:
            logger.critical(f"Ticket count underflow for {identity}")
            raise LedgerInvariantError(f"ticket count underflow for {identity}")
        holder.ticket_count -= 1
        return holder.ticket_count

    @staticmethod
    def accrue_proceeds(db: Session, identity: str, amount: int) -> int:
        holder = OwnershipLedger._get_or_create(db, identity)
        holder.proceeds += amount
        return holder.proceeds

    @staticmethod
    def balance_of(db: Session, identity: str) -> int:
        holder = db.get(Holder, identity)
        return holder.ticket_count if holder else 0

    @staticmethod
    def proceeds_of(db: Session, identity: str) -> int:
        holder = db.get(Holder, identity)
        return holder.proceeds if holder else 0

    @staticmethod
    def owner_of(db: Session, ticket_id: int) -> str:
        return AccessControl.require_ticket_exists(db, ticket_id).owner

    @staticmethod
    def is_owner(db: Session, identity: str, ticket_id: int) -> bool:
        return OwnershipLedger.owner_of(db, ticket_id) == identity

    @staticmethod
    def tickets_of(db: Session, identity: str) -> List[Ticket]:
        return db.query(Ticket).filter(Ticket.owner == identity).order_by(Ticket.id).all()
