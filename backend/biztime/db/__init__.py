import importlib
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from biztime.config import settings

log = logging.getLogger("biztime.db")

DATABASE_URL = settings.DATABASE_URL


def _engine_kwargs(url: str) -> dict:
    """
    Connection options that bound how long a store call may wait.

    SQLite waits on its file lock for `timeout` seconds; pooled server
    databases wait `pool_timeout` seconds for a free connection.
    """
    if url.startswith("sqlite"):
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": settings.DB_TIMEOUT_SECONDS,
            }
        }
    return {"pool_timeout": settings.DB_TIMEOUT_SECONDS, "pool_pre_ping": True}


engine = create_engine(DATABASE_URL, future=True, echo=False, **_engine_kwargs(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ships with FK enforcement off; invoices.comp_code relies on it
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


MODEL_MODULES = [
    "biztime.models.company",
    "biztime.models.invoice",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema.

    Imports every model module so the metadata is populated, then creates
    missing tables. With ``reset=True`` all tables are dropped first, which
    the test suite uses to start from a clean store.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset:
        log.info("Resetting database at %s", engine.url)
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database initialized.")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
