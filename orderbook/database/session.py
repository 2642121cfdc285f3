# orderbook/database/session.py
import logging
import time
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool

from orderbook.config import get_settings
from orderbook.errors import (
    ConstraintViolation,
    OperationTimeout,
    OrderbookError,
    StoreFailure,
)

logger = logging.getLogger(__name__)

DEADLINE_OPTION = "orderbook_deadline"


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def make_engine(
    url: str,
    echo: bool = False,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_timeout: float = 30,
) -> Engine:
    """
    Build the pooled engine every component receives.

    SQLite: one writer at a time, so each transaction takes the write lock up
    front (BEGIN IMMEDIATE) and a read-then-write unit of work cannot interleave
    with another writer. Elsewhere the order row is locked with FOR UPDATE.
    """
    if _is_sqlite(url):
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": pool_timeout},
        )

        @event.listens_for(engine, "connect")
        def _sqlite_on_connect(dbapi_connection, connection_record):
            # let SQLAlchemy emit BEGIN itself
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        default_busy_ms = int(pool_timeout * 1000)

        @event.listens_for(engine, "begin")
        def _sqlite_on_begin(conn):
            # a caller deadline also bounds the wait for the write lock
            deadline = conn.get_execution_options().get(DEADLINE_OPTION)
            busy_ms = default_busy_ms
            if deadline is not None:
                busy_ms = min(busy_ms, max(1, int((deadline[0] - time.monotonic()) * 1000)))
            conn.exec_driver_sql(f"PRAGMA busy_timeout = {busy_ms}")
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    else:
        engine = create_engine(
            url,
            echo=echo,
            poolclass=QueuePool,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=1800,
            pool_pre_ping=True,
            isolation_level="READ COMMITTED",
        )

    @event.listens_for(engine, "before_cursor_execute")
    def _enforce_deadline(conn, cursor, statement, parameters, context, executemany):
        deadline = conn.get_execution_options().get(DEADLINE_OPTION)
        if deadline is not None and time.monotonic() >= deadline[0]:
            raise OperationTimeout(deadline[1])

    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@lru_cache()
def get_engine() -> Engine:
    settings = get_settings()
    return make_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
    )


@lru_cache()
def get_session_factory() -> sessionmaker:
    return make_session_factory(get_engine())


def check_database_connection(engine: Optional[Engine] = None) -> bool:
    engine = engine or get_engine()
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return True


def _arm_deadline(db: Session, timeout: float) -> None:
    # execution options live on this checkout only, never on the pooled connection
    conn = db.connection(
        execution_options={DEADLINE_OPTION: (time.monotonic() + timeout, timeout)}
    )
    if conn.dialect.name == "postgresql":
        conn.execute(
            text("SELECT set_config('statement_timeout', :ms, true)"),
            {"ms": str(max(1, int(timeout * 1000)))},
        )


def _is_deadline_error(e: OperationalError) -> bool:
    message = str(e.orig).lower()
    return "cancel" in message or "database is locked" in message


@contextmanager
def unit_of_work(session_factory: sessionmaker, timeout: Optional[float] = None) -> Iterator[Session]:
    """
    One session, one transaction.

    Commits when the block exits normally, rolls back on any exception and
    always returns the connection to the pool. Store errors leave as
    ConstraintViolation / OperationTimeout / StoreFailure.
    """
    db: Session = session_factory()
    try:
        with db.begin():
            if timeout is not None:
                _arm_deadline(db, timeout)
            yield db
    except OrderbookError:
        raise
    except IntegrityError as e:
        raise ConstraintViolation(str(e.orig)) from e
    except OperationalError as e:
        if timeout is not None and _is_deadline_error(e):
            raise OperationTimeout(timeout) from e
        logger.warning("Store operation failed: %s", e)
        raise StoreFailure(str(e)) from e
    except SQLAlchemyError as e:
        logger.warning("Store operation failed: %s", e)
        raise StoreFailure(str(e)) from e
    finally:
        db.close()
