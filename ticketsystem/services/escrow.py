import logging
from typing import Optional
from sqlalchemy.orm import Session

from ticketsystem.database import atomic, serialized
from ticketsystem.models.event import SystemState
from ticketsystem.models.holder import Holder
from ticketsystem.models.transaction import Transaction, TransactionType
from ticketsystem.services.access import AccessControl
from ticketsystem.services.event import EventService
from ticketsystem.services.notifications import (
    NotificationService, BALANCE_WITHDRAWN, PROCEEDS_CLAIMED
)

logger = logging.getLogger(__name__)


class EscrowService:
    @staticmethod
    def deposit(
        db: Session,
        state: SystemState,
        identity: str,
        amount: int,
        transaction_type: TransactionType,
        ticket_id: Optional[int] = None
    ) -> int:
        """
        Credit a payment to escrow within the caller's operation.
        Does not commit.
        """
        state.escrow_balance += amount
        db.add(Transaction(
            type=transaction_type,
            identity=identity,
            ticket_id=ticket_id,
            amount=amount
        ))
        return state.escrow_balance

    @staticmethod
    def balance(db: Session) -> int:
        return EventService.get_state(db).escrow_balance

    @staticmethod
    @serialized
    def withdraw(db: Session, caller: str) -> int:
        """
        Pay the entire escrow balance out to the issuer.
        The balance is zeroed and committed before the payout is recorded
        as sent, so a second withdrawal can only ever see zero.
        """
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_issuer(config, caller)

        with atomic(db):
            amount = state.escrow_balance
            state.escrow_balance = 0
            if amount:
                db.add(Transaction(
                    type=TransactionType.WITHDRAWAL,
                    identity=config.issuer,
                    amount=amount
                ))
            NotificationService.emit(db, BALANCE_WITHDRAWN, identity=config.issuer, value=amount)

        logger.info(f"Transferred {amount} from escrow to {config.issuer}")
        return amount

    @staticmethod
    @serialized
    def claim_proceeds(db: Session, caller: str) -> int:
        """Pay out the resale proceeds accrued to a seller."""
        AccessControl.require_event_created(db)
        holder = db.get(Holder, caller)

        with atomic(db):
            amount = holder.proceeds if holder else 0
            if amount:
                holder.proceeds = 0
                db.add(Transaction(
                    type=TransactionType.PROCEEDS_CLAIM,
                    identity=caller,
                    amount=amount
                ))
            NotificationService.emit(db, PROCEEDS_CLAIMED, identity=caller, value=amount)

        logger.info(f"Transferred {amount} in resale proceeds to {caller}")
        return amount
