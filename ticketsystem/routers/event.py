from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ticketsystem.database import get_db
from ticketsystem.services.event import EventService
from ticketsystem.schemas.event import EventResponse, EventStatusResponse

router = APIRouter(prefix="/event", tags=["event"])


@router.get("", response_model=EventResponse)
def get_event(db: Session = Depends(get_db)):
    return EventService.get_config(db)


@router.get("/status", response_model=EventStatusResponse)
def get_event_status(db: Session = Depends(get_db)):
    return EventService.get_state(db)
