from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.models.company import Company
from biztime.models.invoice import Invoice


class CompanyRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, code: str) -> Optional[Company]:
        return self.db.query(Company).filter(Company.code == code).first()

    def list(self) -> List[Company]:
        return self.db.query(Company).order_by(Company.code).all()

    def invoice_ids(self, code: str) -> List[int]:
        rows = (
            self.db.query(Invoice.id)
            .filter(Invoice.comp_code == code)
            .order_by(Invoice.id)
            .all()
        )
        return [r[0] for r in rows]

    def has_invoices(self, code: str) -> bool:
        return (
            self.db.query(Invoice.id).filter(Invoice.comp_code == code).first()
            is not None
        )

    def create(self, code: str, name: str, description: Optional[str] = None) -> Company:
        c = Company(code=code, name=name, description=description)
        self.db.add(c)
        self.db.flush()
        return c

    def update(self, company: Company, name: str, description: Optional[str] = None) -> Company:
        company.name = name
        company.description = description
        self.db.flush()
        return company

    def delete(self, company: Company):
        self.db.delete(company)
        self.db.flush()
