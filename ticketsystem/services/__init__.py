from ticketsystem.services.auth import AuthService
from ticketsystem.services.access import AccessControl
from ticketsystem.services.event import EventService
from ticketsystem.services.ledger import OwnershipLedger
from ticketsystem.services.escrow import EscrowService
from ticketsystem.services.tickets import TicketService
from ticketsystem.services.notifications import NotificationService

__all__ = [
    "AuthService", "AccessControl", "EventService", "OwnershipLedger",
    "EscrowService", "TicketService", "NotificationService"
]
