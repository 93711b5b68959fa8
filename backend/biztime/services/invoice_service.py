import logging
import os
import tempfile
from decimal import Decimal
from typing import List

from filelock import FileLock, Timeout
from sqlalchemy.orm import Session

from biztime.config import settings
from biztime.errors import InvalidInput, NotFound, StoreError
from biztime.models.invoice import Invoice
from biztime.repositories.company_repo import CompanyRepository
from biztime.repositories.invoice_repo import InvoiceRepository
from biztime.utils.payments import resolve_paid_date
from biztime.utils.transactions import smart_transaction

log = logging.getLogger("biztime.invoices")


def _iso(d):
    return d.isoformat() if d else None


def _to_dict(inv: Invoice) -> dict:
    return {
        "id": inv.id,
        "comp_code": inv.comp_code,
        "amt": float(inv.amt),
        "paid": bool(inv.paid),
        "add_date": _iso(inv.add_date),
        "paid_date": _iso(inv.paid_date),
    }


CENT = Decimal("0.01")
# Numeric(12, 2): ten integer digits
MAX_AMT = Decimal(10) ** 10
# invoice ids are 64-bit signed integers in the store
MAX_INVOICE_ID = 2**63 - 1


def _clean_amt(amt) -> Decimal:
    """Accept int/float/Decimal amounts that are finite, > 0, whole cents and fit the column."""
    if isinstance(amt, bool) or not isinstance(amt, (int, float, Decimal)):
        raise InvalidInput("amt must be a positive number")
    value = Decimal(str(amt))
    if not value.is_finite() or value <= 0:
        raise InvalidInput("amt must be a positive number")
    if value >= MAX_AMT:
        raise InvalidInput(f"amt must be less than {MAX_AMT}")
    if value != value.quantize(CENT):
        raise InvalidInput("amt can't have more than 2 decimal places")
    return value


def _check_id(invoice_id: int, message: str):
    # ids the store can't even represent can't exist
    if not 1 <= invoice_id <= MAX_INVOICE_ID:
        raise NotFound(message)


def _lock_path(invoice_id: int) -> str:
    locks_dir = os.path.join(tempfile.gettempdir(), "biztime_locks")
    os.makedirs(locks_dir, exist_ok=True)
    return os.path.join(locks_dir, f"invoice_{invoice_id}.lock")


class InvoiceService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = InvoiceRepository(db)
        self.company_repo = CompanyRepository(db)

    def list(self) -> List[dict]:
        with smart_transaction(self.db):
            return [{"id": i.id, "comp_code": i.comp_code} for i in self.repo.list()]

    def get(self, invoice_id: int) -> dict:
        missing = f"Can't find invoice with id of {invoice_id}"
        _check_id(invoice_id, missing)
        with smart_transaction(self.db):
            inv = self.repo.get(invoice_id, with_company=True)
            if not inv:
                raise NotFound(missing)
            out = _to_dict(inv)
            del out["comp_code"]
            c = inv.company
            out["company"] = {
                "code": c.code,
                "name": c.name,
                "description": c.description,
            }
            return out

    def create(self, comp_code: str, amt) -> dict:
        if not isinstance(comp_code, str) or not comp_code.strip():
            raise InvalidInput("comp_code is required")
        value = _clean_amt(amt)
        with smart_transaction(self.db, f"Can't find company with code of {comp_code}"):
            if not self.company_repo.get(comp_code):
                raise NotFound(f"Can't find company with code of {comp_code}")
            inv = self.repo.create(comp_code, value)
            out = _to_dict(inv)
        log.info("created invoice %s for %s", out["id"], comp_code)
        return out

    def update(self, invoice_id: int, amt, paid: bool) -> dict:
        """
        Set amt and paid-state of an invoice in one write.

        The current paid_date is read under a per-invoice lock and inside the
        same transaction as the write, so two concurrent "mark paid" calls
        can't both see an unpaid invoice.
        """
        value = _clean_amt(amt)
        if not isinstance(paid, bool):
            raise InvalidInput("paid must be true or false")
        missing = f"Can't update invoice with id: {invoice_id}"
        _check_id(invoice_id, missing)

        lock = FileLock(_lock_path(invoice_id))
        try:
            with lock.acquire(timeout=settings.LOCK_TIMEOUT_SECONDS):
                with smart_transaction(self.db):
                    inv = self.repo.get_for_update(invoice_id)
                    if not inv:
                        raise NotFound(missing)
                    paid_date = resolve_paid_date(inv.paid_date, paid)
                    self.repo.update(inv, value, paid, paid_date)
                    out = _to_dict(inv)
        except Timeout:
            raise StoreError(f"Timed out waiting to update invoice {invoice_id}")
        log.info("updated invoice %s paid=%s paid_date=%s", invoice_id, paid, out["paid_date"])
        return out

    def delete(self, invoice_id: int) -> dict:
        missing = f"Can't delete invoice with id: {invoice_id}"
        _check_id(invoice_id, missing)
        with smart_transaction(self.db):
            inv = self.repo.get(invoice_id)
            if not inv:
                raise NotFound(missing)
            self.repo.delete(inv)
        # lock files live in the temp dir; don't leave one behind per deleted invoice
        try:
            os.remove(_lock_path(invoice_id))
        except FileNotFoundError:
            pass
        log.info("deleted invoice %s", invoice_id)
        return {"status": "deleted"}
