import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from ticketsystem.config import get_settings
from ticketsystem.database import SessionLocal, init_db
from ticketsystem.errors import TicketSystemError
from ticketsystem.middleware.rate_limit import limiter
from ticketsystem.middleware.security import setup_security_middleware
from ticketsystem.services.event import EventService
from ticketsystem.routers import (
    event_router,
    tickets_router,
    holders_router,
    escrow_router,
    admin_router
)

settings = get_settings()
logger = logging.getLogger(__name__)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        EventService.create_from_settings(db, settings)
    finally:
        db.close()
    logger.info("Ticket system started")
    yield
    logger.info("Ticket system shutdown")


app = FastAPI(
    title="Event Ticket System",
    description="Ticket issuance and capped resale for a single event",
    version="1.0.0",
    lifespan=lifespan
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

setup_security_middleware(app, allowed_hosts=settings.allowed_hosts)

app.include_router(event_router)
app.include_router(tickets_router)
app.include_router(holders_router)
app.include_router(escrow_router)
app.include_router(admin_router)


@app.exception_handler(TicketSystemError)
async def ticket_system_error_handler(request: Request, exc: TicketSystemError):
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.kind}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind}
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
