from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ticketsystem.database import get_db
from ticketsystem.middleware.rate_limit import limiter, RATE_LIMIT
from ticketsystem.services.auth import get_caller
from ticketsystem.services.escrow import EscrowService
from ticketsystem.schemas.event import AmountResponse

router = APIRouter(prefix="/escrow", tags=["escrow"])


@router.post("/withdraw", response_model=AmountResponse)
@limiter.limit(RATE_LIMIT)
def withdraw_balance(
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    return AmountResponse(amount=EscrowService.withdraw(db, caller))


@router.post("/proceeds/claim", response_model=AmountResponse)
@limiter.limit(RATE_LIMIT)
def claim_proceeds(
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db)
):
    return AmountResponse(amount=EscrowService.claim_proceeds(db, caller))
