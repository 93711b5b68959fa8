import logging

from fastapi import APIRouter
from sqlalchemy import text

from biztime.db import engine

router = APIRouter()
log = logging.getLogger("biztime.api")


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception as e:
        log.warning("health check: database unreachable: %s", e)

    return {
        "status": "ok" if db_ok else "degraded",
        "db": db_ok,
    }
