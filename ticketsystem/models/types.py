from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator


class Amount(TypeDecorator):
    """
    Whole currency amount in the smallest unit, read back as ``int``.

    Wei-scale totals run past 64 bits, so amounts are stored as
    NUMERIC(78, 0). SQLite would round such numbers to REAL, so there
    they are kept as decimal strings instead.
    """

    impl = Numeric(78, 0)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(78))
        return dialect.type_descriptor(Numeric(78, 0))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == "sqlite":
            return str(int(value))
        return Decimal(int(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)
