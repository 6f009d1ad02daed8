from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ticketsystem.database import get_db
from ticketsystem.middleware.rate_limit import limiter, RATE_LIMIT
from ticketsystem.services.access import AccessControl
from ticketsystem.services.auth import get_caller
from ticketsystem.services.event import EventService
from ticketsystem.services.notifications import NotificationService
from ticketsystem.services.tickets import TicketService
from ticketsystem.schemas.event import NotificationResponse, SupplyCapUpdate

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/tickets/{ticket_id}/used")
@limiter.limit(RATE_LIMIT)
def mark_ticket_used(
    request: Request,
    ticket_id: int,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.mark_used(db, caller, ticket_id)
    return {"status": "success"}


@router.put("/supply")
@limiter.limit(RATE_LIMIT)
def set_supply_cap(
    request: Request,
    body: SupplyCapUpdate,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    TicketService.set_supply_cap(db, caller, body.supply_cap)
    return {"status": "success"}


@router.post("/pause")
@limiter.limit(RATE_LIMIT)
def pause(
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    EventService.pause(db, caller)
    return {"status": "success"}


@router.post("/unpause")
@limiter.limit(RATE_LIMIT)
def unpause(
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    EventService.unpause(db, caller)
    return {"status": "success"}


@router.get("/notifications", response_model=List[NotificationResponse])
def list_notifications(
    name: Optional[str] = None,
    limit: int = Query(50, ge=1, le=500),
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    AccessControl.require_issuer(EventService.get_config(db), caller)
    return NotificationService.recent(db, limit=limit, name=name)
