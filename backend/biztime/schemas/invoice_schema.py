# Request/response shapes for /invoices. amt leaves as a JSON number.
# Request fields are strict: "100" or "yes" are rejected, not coerced.
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt

from biztime.schemas.company_schema import CompanyOut


class InvoiceCreateIn(BaseModel):
    comp_code: str
    amt: Union[StrictInt, StrictFloat]


class InvoiceUpdateIn(BaseModel):
    amt: Union[StrictInt, StrictFloat]
    paid: StrictBool


class InvoiceSummary(BaseModel):
    id: int
    comp_code: str


class InvoiceOut(InvoiceSummary):
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None


class InvoiceDetail(BaseModel):
    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: CompanyOut
