from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.api.errors import install_error_handlers
from biztime.api.health import router as health_router
from biztime.api.routes_companies import router as companies_router
from biztime.api.routes_invoices import router as invoices_router
from biztime.config import settings
from biztime.db import init_db
from biztime.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    log = configure_logging(settings.LOG_LEVEL)
    # RESET_DB=1 in tests/CI drops and recreates the tables
    init_db(reset=settings.RESET_DB)
    log.info("BizTime API is running")
    yield


app = FastAPI(title="BizTime", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(companies_router)

app.include_router(invoices_router)
