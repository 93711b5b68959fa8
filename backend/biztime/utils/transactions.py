import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from biztime.errors import Conflict, StoreError

log = logging.getLogger("biztime.db")


@contextmanager
def smart_transaction(session: Session, conflict_message: Optional[str] = None) -> Iterator:
    """
    Context manager that begins a transaction on the given Session.
    If a transaction is already active, start a nested SAVEPOINT (begin_nested).
    Otherwise start a normal transaction (begin).

    Store failures leave as service errors: a constraint violation becomes
    Conflict (with ``conflict_message`` when given), a lost connection or an
    expired wait becomes StoreError. The transaction is rolled back either way.

    Usage:
        with smart_transaction(db, "Company already exists"):
            ... DB work ...
    """
    if session.in_transaction():
        cm = session.begin_nested()
    else:
        cm = session.begin()
    try:
        with cm:
            yield
    except IntegrityError as e:
        log.warning("constraint violation: %s", e.orig)
        raise Conflict(conflict_message or "Constraint violation") from e
    except (OperationalError, PoolTimeoutError) as e:
        log.warning("store unavailable: %s", e)
        raise StoreError("Database unavailable") from e
