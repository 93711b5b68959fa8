import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.errors import Conflict, InvalidInput, NotFound
from biztime.models.company import Company
from biztime.repositories.company_repo import CompanyRepository
from biztime.utils.slug import slugify_code
from biztime.utils.transactions import smart_transaction

log = logging.getLogger("biztime.companies")


def _to_dict(c: Company) -> dict:
    return {"code": c.code, "name": c.name, "description": c.description}


def _clean_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("Company name is required")
    return name.strip()


class CompanyService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CompanyRepository(db)

    def list(self) -> List[dict]:
        with smart_transaction(self.db):
            return [{"code": c.code, "name": c.name} for c in self.repo.list()]

    def get(self, code: str) -> dict:
        with smart_transaction(self.db):
            c = self.repo.get(code)
            if not c:
                raise NotFound(f"Can't find company with code of {code}")
            out = _to_dict(c)
            out["invoices"] = self.repo.invoice_ids(code)
            return out

    def create(self, name: str, description: Optional[str] = None) -> dict:
        name = _clean_name(name)
        code = slugify_code(name)
        with smart_transaction(self.db, f"Company with code {code} already exists"):
            if self.repo.get(code):
                raise Conflict(f"Company with code {code} already exists")
            c = self.repo.create(code, name, description)
            out = _to_dict(c)
        log.info("created company %s", code)
        return out

    def update(self, code: str, name: str, description: Optional[str] = None) -> dict:
        name = _clean_name(name)
        with smart_transaction(self.db):
            c = self.repo.get(code)
            if not c:
                raise NotFound(f"Can't update company with code of {code}")
            self.repo.update(c, name, description)
            out = _to_dict(c)
        log.info("updated company %s", code)
        return out

    def delete(self, code: str) -> dict:
        conflict = f"Company {code} still has invoices"
        with smart_transaction(self.db, conflict):
            c = self.repo.get(code)
            if not c:
                raise NotFound(f"No company with code: {code}")
            # the FK restricts this too; checking first gives a clean message
            if self.repo.has_invoices(code):
                raise Conflict(conflict)
            self.repo.delete(c)
        log.info("deleted company %s", code)
        return {"status": "deleted"}
