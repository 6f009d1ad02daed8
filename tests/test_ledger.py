import pytest

from ticketsystem.errors import LedgerInvariantError, TicketNotFound
from ticketsystem.services.ledger import OwnershipLedger
from ticketsystem.services.tickets import TicketService

from tests.conftest import ATTENDEE1, ATTENDEE2, UNIT, assert_ledger_consistent


def test_unknown_identity_has_zero_balance(db, event):
    assert OwnershipLedger.balance_of(db, "nobody") == 0
    assert OwnershipLedger.proceeds_of(db, "nobody") == 0


def test_balance_counts_owned_tickets(db, event):
    for _ in range(3):
        TicketService.mint(db, ATTENDEE1, UNIT)
    TicketService.mint(db, ATTENDEE2, UNIT)

    assert OwnershipLedger.balance_of(db, ATTENDEE1) == 3
    assert OwnershipLedger.balance_of(db, ATTENDEE2) == 1
    assert [t.id for t in OwnershipLedger.tickets_of(db, ATTENDEE1)] == [0, 1, 2]
    assert_ledger_consistent(db)


def test_is_owner(db, event):
    TicketService.mint(db, ATTENDEE1, UNIT)

    assert OwnershipLedger.is_owner(db, ATTENDEE1, 0) is True
    assert OwnershipLedger.is_owner(db, ATTENDEE2, 0) is False
    with pytest.raises(TicketNotFound):
        OwnershipLedger.is_owner(db, ATTENDEE1, 1)


def test_debit_underflow_is_fatal(db, event):
    with pytest.raises(LedgerInvariantError):
        OwnershipLedger.debit(db, "nobody")

    TicketService.mint(db, ATTENDEE1, UNIT)
    OwnershipLedger.debit(db, ATTENDEE1)
    with pytest.raises(LedgerInvariantError):
        OwnershipLedger.debit(db, ATTENDEE1)
    db.rollback()

    assert OwnershipLedger.balance_of(db, ATTENDEE1) == 1


def test_mixed_history_keeps_ledger_consistent(db, event):
    for _ in range(4):
        TicketService.mint(db, ATTENDEE1, UNIT)
    TicketService.destroy(db, ATTENDEE1, 1)
    TicketService.set_for_sale(db, ATTENDEE1, 2)
    TicketService.approve_buyer(db, ATTENDEE1, 2, ATTENDEE2)
    TicketService.buy_from_holder(db, ATTENDEE2, 2, UNIT)
    TicketService.mint(db, ATTENDEE2, UNIT)

    assert OwnershipLedger.balance_of(db, ATTENDEE1) == 2
    assert OwnershipLedger.balance_of(db, ATTENDEE2) == 2
    assert_ledger_consistent(db)
