from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.db import get_db
from biztime.schemas.invoice_schema import (
    InvoiceCreateIn,
    InvoiceDetail,
    InvoiceOut,
    InvoiceSummary,
    InvoiceUpdateIn,
)
from biztime.services.invoice_service import InvoiceService

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", summary="List invoices")
def list_invoices(db: Session = Depends(get_db)):
    svc = InvoiceService(db)
    return {
        "invoices": [
            InvoiceSummary(**i).model_dump() for i in svc.list()
        ]
    }


@router.get("/{invoice_id}", summary="Get invoice with its company")
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    svc = InvoiceService(db)
    return {"invoice": InvoiceDetail(**svc.get(invoice_id)).model_dump(mode="json")}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Add invoice")
def create_invoice(payload: InvoiceCreateIn, db: Session = Depends(get_db)):
    svc = InvoiceService(db)
    inv = svc.create(payload.comp_code, payload.amt)
    return {"invoice": InvoiceOut(**inv).model_dump(mode="json")}


@router.api_route("/{invoice_id}", methods=["PUT", "PATCH"], summary="Update invoice amount and paid state")
def update_invoice(invoice_id: int, payload: InvoiceUpdateIn, db: Session = Depends(get_db)):
    """
    payload: { "amt": 100, "paid": true }
    paid_date is set the first time an invoice is paid and cleared when unpaid.
    """
    svc = InvoiceService(db)
    inv = svc.update(invoice_id, payload.amt, payload.paid)
    return {"invoice": InvoiceOut(**inv).model_dump(mode="json")}


@router.delete("/{invoice_id}", summary="Delete invoice")
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    svc = InvoiceService(db)
    return svc.delete(invoice_id)
