"""Error taxonomy for ticket operations.

Every error aborts the whole operation. Services raise these before any
state is mutated; the HTTP layer turns them into JSON responses carrying
the stable ``message``.
"""


class TicketSystemError(Exception):
    message = "operation rejected"
    status_code = 400

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(TicketSystemError):
    status_code = 400


class PaymentError(TicketSystemError):
    status_code = 402


class StateError(TicketSystemError):
    status_code = 409


class SupplyExhausted(ValidationError):
    message = "no more new tickets available"


class PriceCapExceeded(ValidationError):
    message = "price must be lower than the maximum price"


class UsedTicket(ValidationError):
    message = "ticket already used"


class Unauthorized(ValidationError):
    message = "no permission"
    status_code = 403


class InvalidSupplyCap(ValidationError):
    message = "invalid supply cap"


class InvalidEventConfig(ValidationError):
    message = "invalid event configuration"


class InsufficientPayment(PaymentError):
    message = "insufficient payment"


class OverpaymentRejected(PaymentError):
    message = "payment must equal the ticket price"


class NotForSale(StateError):
    message = "ticket not for sale"


class TicketNotFound(StateError):
    message = "ticket does not exist"
    status_code = 404


class SystemPaused(StateError):
    message = "system paused"


class EventNotCreated(StateError):
    message = "event not created"


class EventAlreadyCreated(StateError):
    message = "event already created"


class LedgerInvariantError(RuntimeError):
    """Raised when a ledger would be driven negative. Always a bug."""
