from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.db import get_db
from biztime.schemas.company_schema import (
    CompanyDetail,
    CompanyIn,
    CompanyOut,
    CompanySummary,
)
from biztime.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", summary="List companies")
def list_companies(db: Session = Depends(get_db)):
    svc = CompanyService(db)
    return {
        "companies": [
            CompanySummary(**c).model_dump() for c in svc.list()
        ]
    }


@router.get("/{code}", summary="Get company with its invoice ids")
def get_company(code: str, db: Session = Depends(get_db)):
    svc = CompanyService(db)
    return {"company": CompanyDetail(**svc.get(code)).model_dump()}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Add company")
def create_company(payload: CompanyIn, db: Session = Depends(get_db)):
    """The company code is derived from the name, never taken from the body."""
    svc = CompanyService(db)
    c = svc.create(payload.name, payload.description)
    return {"company": CompanyOut(**c).model_dump()}


@router.api_route("/{code}", methods=["PUT", "PATCH"], summary="Edit company")
def update_company(code: str, payload: CompanyIn, db: Session = Depends(get_db)):
    svc = CompanyService(db)
    c = svc.update(code, payload.name, payload.description)
    return {"company": CompanyOut(**c).model_dump()}


@router.delete("/{code}", summary="Delete company")
def delete_company(code: str, db: Session = Depends(get_db)):
    svc = CompanyService(db)
    return svc.delete(code)
