from ticketsystem.routers.event import router as event_router
from ticketsystem.routers.tickets import router as tickets_router
from ticketsystem.routers.holders import router as holders_router
from ticketsystem.routers.escrow import router as escrow_router
from ticketsystem.routers.admin import router as admin_router

__all__ = [
    "event_router",
    "tickets_router",
    "holders_router",
    "escrow_router",
    "admin_router"
]
