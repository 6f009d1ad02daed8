from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ticketsystem.database import get_db
from ticketsystem.services.ledger import OwnershipLedger
from ticketsystem.schemas.ticket import HolderResponse, OwnershipResponse, TicketResponse

router = APIRouter(prefix="/holders", tags=["holders"])


@router.get("/{identity}", response_model=HolderResponse)
def get_holder(identity: str, db: Session = Depends(get_db)):
    return HolderResponse(
        identity=identity,
        balance=OwnershipLedger.balance_of(db, identity),
        proceeds=OwnershipLedger.proceeds_of(db, identity)
    )


@router.get("/{identity}/tickets", response_model=List[TicketResponse])
def get_holder_tickets(identity: str, db: Session = Depends(get_db)):
    return OwnershipLedger.tickets_of(db, identity)


@router.get("/{identity}/tickets/{ticket_id}", response_model=OwnershipResponse)
def check_ownership(identity: str, ticket_id: int, db: Session = Depends(get_db)):
    return OwnershipResponse(
        identity=identity,
        ticket_id=ticket_id,
        is_owner=OwnershipLedger.is_owner(db, identity, ticket_id)
    )
