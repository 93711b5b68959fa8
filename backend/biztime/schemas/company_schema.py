from typing import List, Optional

from pydantic import BaseModel


class CompanyIn(BaseModel):
    name: str
    description: Optional[str] = None


class CompanySummary(BaseModel):
    code: str
    name: str


class CompanyOut(CompanySummary):
    description: Optional[str] = None


class CompanyDetail(CompanyOut):
    invoices: List[int] = []
