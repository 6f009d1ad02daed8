from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from ticketsystem.database import get_db
from ticketsystem.middleware.rate_limit import limiter, RATE_LIMIT
from ticketsystem.services.auth import get_caller
from ticketsystem.services.tickets import TicketService
from ticketsystem.services.ledger import OwnershipLedger
from ticketsystem.schemas.ticket import (
    MintRequest, MintResponse, PriceUpdate, BuyerApproval, PurchaseRequest,
    TicketResponse, OwnerResponse, MaxPriceResponse
)

router = APIRouter(prefix="/tickets", tags=["tickets"])


@router.post("", response_model=MintResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMIT)
def mint_ticket(
    request: Request,
    body: MintRequest,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    ticket_id = TicketService.mint(db, caller, body.payment)
    return MintResponse(ticket_id=ticket_id)


@router.get("", response_model=List[TicketResponse])
def list_tickets(
    for_sale: bool = False,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    if for_sale:
        return TicketService.list_for_sale(db)
    return TicketService.list_all(db, skip=skip, limit=limit)


@router.get("/{ticket_id}", response_model=TicketResponse)
def get_ticket(ticket_id: int, db: Session = Depends(get_db)):
    return TicketService.get_ticket(db, ticket_id)


@router.get("/{ticket_id}/owner", response_model=OwnerResponse)
def get_ticket_owner(ticket_id: int, db: Session = Depends(get_db)):
    return OwnerResponse(ticket_id=ticket_id, owner=OwnershipLedger.owner_of(db, ticket_id))


@router.get("/{ticket_id}/max-price", response_model=MaxPriceResponse)
def get_max_price(ticket_id: int, db: Session = Depends(get_db)):
    return MaxPriceResponse(
        ticket_id=ticket_id,
        max_price=TicketService.max_allowed_price(db, ticket_id)
    )


@router.delete("/{ticket_id}")
@limiter.limit(RATE_LIMIT)
def destroy_ticket(
    request: Request,
    ticket_id: int,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.destroy(db, caller, ticket_id)
    return {"status": "success"}


@router.put("/{ticket_id}/price")
@limiter.limit(RATE_LIMIT)
def set_ticket_price(
    request: Request,
    ticket_id: int,
    body: PriceUpdate,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.set_price(db, caller, ticket_id, body.price)
    return {"status": "success"}


@router.post("/{ticket_id}/sale")
@limiter.limit(RATE_LIMIT)
def set_ticket_for_sale(
    request: Request,
    ticket_id: int,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.set_for_sale(db, caller, ticket_id)
    return {"status": "success"}


@router.delete("/{ticket_id}/sale")
@limiter.limit(RATE_LIMIT)
def cancel_ticket_sale(
    request: Request,
    ticket_id: int,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.cancel_sale(db, caller, ticket_id)
    return {"status": "success"}


@router.post("/{ticket_id}/approval")
@limiter.limit(RATE_LIMIT)
def approve_buyer(
    request: Request,
    ticket_id: int,
    body: BuyerApproval,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.approve_buyer(db, caller, ticket_id, body.buyer)
    return {"status": "success"}


@router.post("/{ticket_id}/purchase")
@limiter.limit(RATE_LIMIT)
def buy_from_holder(
    request: Request,
    ticket_id: int,
    body: PurchaseRequest,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.buy_from_holder(db, caller, ticket_id, body.payment)
    return {"status": "success"}
