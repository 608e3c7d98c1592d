"""
Database engine, session factory and helpers
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log

from storefront.config import settings

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Iterator[Session]:
    """FastAPI dependency yielding a request-scoped session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run a group of writes as one unit of work.
    
    Commits when the block exits normally and rolls back on any exception,
    which is then re-raised.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


@retry(
    stop=stop_after_attempt(settings.DB_CONNECT_RETRIES),
    wait=wait_exponential(multiplier=settings.DB_CONNECT_RETRY_DELAY, min=1, max=10),
    retry=retry_if_exception_type(OperationalError),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True
)
def init_db(bind=None) -> None:
    """Wait for the database and create tables"""
    bind = bind or engine
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))
    
    # Register models on Base.metadata
    from storefront import models  # noqa: F401
    
    Base.metadata.create_all(bind=bind)
