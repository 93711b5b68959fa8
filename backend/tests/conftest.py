import os
import tempfile
from datetime import date
from decimal import Decimal

# point the app at a throwaway SQLite file before biztime reads its settings
_tmpdir = tempfile.mkdtemp(prefix="biztime-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ.setdefault("LOCK_TIMEOUT_SECONDS", "2")

import pytest

from biztime.db import SessionLocal, init_db
from biztime.models.company import Company
from biztime.models.invoice import Invoice

PAID_ON = date(2018, 1, 1)


@pytest.fixture(autouse=True)
def setup_db():
    """
    Fresh tables for every test, seeded with:
      apple: invoices 1 (100, unpaid) and 2 (200, paid on 2018-01-01)
      ibm:   invoice 3 (300, unpaid)
    """
    init_db(reset=True)
    db = SessionLocal()
    try:
        db.add(Company(code="apple", name="Apple", description="Maker of OSX."))
        db.add(Company(code="ibm", name="IBM", description="Big blue."))
        db.flush()
        db.add(Invoice(comp_code="apple", amt=Decimal("100"), paid=False, paid_date=None))
        db.add(Invoice(comp_code="apple", amt=Decimal("200"), paid=True, paid_date=PAID_ON))
        db.add(Invoice(comp_code="ibm", amt=Decimal("300"), paid=False, paid_date=None))
        db.commit()
    finally:
        db.close()
    yield


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()
