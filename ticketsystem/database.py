import threading
from contextlib import contextmanager
from functools import wraps

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from ticketsystem.config import get_settings

settings = get_settings()

connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Operations run one at a time, in the order they acquire the lock.
# Held only inside the thread running the operation.
operation_lock = threading.RLock()


def init_db(bind=None):
    """Create all tables."""
    import ticketsystem.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def serialized(func):
    """Run an operation, gates included, while holding the operation lock."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        with operation_lock:
            return func(*args, **kwargs)

    return wrapper


@contextmanager
def atomic(db: Session):
    """Commit everything done in the block, or nothing at all."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
