from ticketsystem.models.event import EventConfig, SystemState
from ticketsystem.models.ticket import Ticket
from ticketsystem.models.holder import Holder
from ticketsystem.models.transaction import Transaction, TransactionType
from ticketsystem.models.notification import Notification

__all__ = [
    "EventConfig", "SystemState", "Ticket", "Holder",
    "Transaction", "TransactionType", "Notification"
]
