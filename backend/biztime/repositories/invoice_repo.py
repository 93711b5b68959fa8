from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from biztime.models.invoice import Invoice


class InvoiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, invoice_id: int, with_company: bool = False) -> Optional[Invoice]:
        qry = self.db.query(Invoice).filter(Invoice.id == invoice_id)
        if with_company:
            qry = qry.options(joinedload(Invoice.company))
        return qry.first()

    def get_for_update(self, invoice_id: int) -> Optional[Invoice]:
        """
        Load an invoice with a row-level lock. Dialects without FOR UPDATE
        (SQLite) compile it away, callers hold a file lock as well.
        """
        return (
            self.db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    def list(self) -> List[Invoice]:
        return self.db.query(Invoice).order_by(Invoice.id).all()

    def create(self, comp_code: str, amt: Decimal) -> Invoice:
        inv = Invoice(comp_code=comp_code, amt=amt, paid=False, paid_date=None)
        self.db.add(inv)
        self.db.flush()
        return inv

    def update(self, invoice: Invoice, amt: Decimal, paid: bool, paid_date: Optional[date]) -> Invoice:
        invoice.amt = amt
        invoice.paid = paid
        invoice.paid_date = paid_date
        self.db.flush()
        return invoice

    def delete(self, invoice: Invoice):
        self.db.delete(invoice)
        self.db.flush()
