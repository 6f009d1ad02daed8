import logging
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session

from ticketsystem.config import Settings
from ticketsystem.database import atomic, serialized
from ticketsystem.errors import (
    EventAlreadyCreated, EventNotCreated, InvalidEventConfig, StateError
)
from ticketsystem.models.event import EVENT_ID, EventConfig, SystemState
from ticketsystem.services.access import AccessControl
from ticketsystem.services.notifications import NotificationService, PAUSED, UNPAUSED

logger = logging.getLogger(__name__)


class EventService:
    @staticmethod
    def validate_parameters(
        supply_cap: int,
        base_price: int,
        price_multiple_cap: int,
        transfer_fee_percent: int
    ) -> None:
        if supply_cap < 1:
            raise InvalidEventConfig("invalid event configuration: supply cap must be at least 1")
        if base_price <= 0:
            raise InvalidEventConfig("invalid event configuration: base price must be positive")
        if price_multiple_cap < 1:
            raise InvalidEventConfig("invalid event configuration: price multiple cap must be at least 1")
        if not 0 <= transfer_fee_percent <= 100:
            raise InvalidEventConfig("invalid event configuration: transfer fee must be between 0 and 100 percent")

    @staticmethod
    @serialized
    def create_event(
        db: Session,
        name: str,
        symbol: str,
        start_date: int,
        supply_cap: int,
        base_price: int,
        price_multiple_cap: int,
        transfer_fee_percent: int,
        issuer: str
    ) -> EventConfig:
        """
        Create the event. Parameters are fixed for the lifetime of the system;
        the caller becomes the issuer.
        """
        EventService.validate_parameters(
            supply_cap, base_price, price_multiple_cap, transfer_fee_percent
        )
        if db.get(EventConfig, EVENT_ID) is not None:
            raise EventAlreadyCreated()

        with atomic(db):
            config = EventConfig(
                id=EVENT_ID,
                name=name,
                symbol=symbol,
                start_date=start_date,
                initial_supply_cap=supply_cap,
                base_price=base_price,
                price_multiple_cap=price_multiple_cap,
                transfer_fee_percent=transfer_fee_percent,
                issuer=issuer
            )
            db.add(config)
            db.add(SystemState(
                id=EVENT_ID,
                supply_cap=supply_cap,
                minted_count=0,
                paused=False,
                escrow_balance=0
            ))

        start = datetime.fromtimestamp(start_date, tz=timezone.utc).date().isoformat()
        logger.info(f"Created event {name} ({symbol}) on {start}")
        logger.info(f"A maximum of {supply_cap} tickets are available at {base_price} each")
        logger.info(
            f"Ticket prices are capped at {price_multiple_cap}x the base price, "
            f"transfer fee is {transfer_fee_percent}%"
        )
        return config

    @staticmethod
    def create_from_settings(db: Session, settings: Settings) -> Optional[EventConfig]:
        """Create the event from configured parameters unless it already exists."""
        if not settings.has_event_parameters:
            logger.info("No event parameters configured, skipping event creation")
            return None
        if db.get(EventConfig, EVENT_ID) is not None:
            return None
        return EventService.create_event(
            db,
            name=settings.event_name,
            symbol=settings.event_symbol,
            start_date=settings.event_start_date,
            supply_cap=settings.event_supply_cap,
            base_price=settings.event_base_price,
            price_multiple_cap=settings.event_price_multiple_cap,
            transfer_fee_percent=settings.event_transfer_fee_percent,
            issuer=settings.issuer
        )

    @staticmethod
    def get_config(db: Session) -> EventConfig:
        config = db.get(EventConfig, EVENT_ID)
        if config is None:
            raise EventNotCreated()
        return config

    @staticmethod
    def get_state(db: Session) -> SystemState:
        state = db.get(SystemState, EVENT_ID)
        if state is None:
            raise EventNotCreated()
        return state

    @staticmethod
    @serialized
    def pause(db: Session, caller: str) -> None:
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_issuer(config, caller)
        AccessControl.require_not_paused(state)

        with atomic(db):
            state.paused = True
            NotificationService.emit(db, PAUSED, identity=caller)
        logger.info(f"System paused by {caller}")

    @staticmethod
    @serialized
    def unpause(db: Session, caller: str) -> None:
        config = EventService.get_config(db)
        state = EventService.get_state(db)
        AccessControl.require_issuer(config, caller)
        if not state.paused:
            raise StateError("system not paused")

        with atomic(db):
            state.paused = False
            NotificationService.emit(db, UNPAUSED, identity=caller)
        logger.info(f"System unpaused by {caller}")
