import logging
import time

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import Config

logger = logging.getLogger(__name__)

class Base(DeclarativeBase):
    pass

def build_engine(database_url: str = None) -> AsyncEngine:
    """
    Creates the process-wide engine. Pool limits only apply to server databases;
    SQLite (used by the test-suite) keeps SQLAlchemy's default pool.
    """
    url = database_url or Config.DATABASE_URL
    options = {"echo": Config.DB_ECHO}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=Config.DB_POOL_SIZE,
            max_overflow=Config.DB_MAX_OVERFLOW,
            pool_timeout=Config.DB_POOL_TIMEOUT,
            pool_recycle=Config.DB_POOL_RECYCLE,
            pool_pre_ping=True,
        )

    engine = create_async_engine(url, **options)
    _install_listeners(engine)
    return engine

def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine, class_=AsyncSession)

def _install_listeners(engine: AsyncEngine):
    sync_engine = engine.sync_engine

    if sync_engine.dialect.name == "sqlite":
        @event.listens_for(sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    @event.listens_for(sync_engine, "before_cursor_execute")
    def _start_timer(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start", []).append(time.perf_counter())

    @event.listens_for(sync_engine, "after_cursor_execute")
    def _log_query(conn, cursor, statement, parameters, context, executemany):
        started = conn.info["query_start"].pop()
        logger.debug(
            "Executed query %s (%.1f ms, rows=%s)",
            " ".join(statement.split())[:120], (time.perf_counter() - started) * 1000, cursor.rowcount,
        )

    # after_cursor_execute is skipped for failed statements
    @event.listens_for(sync_engine, "handle_error")
    def _drop_timer(exception_context):
        conn = exception_context.connection
        if conn is not None and conn.info.get("query_start"):
            conn.info["query_start"].pop()

async def get_db(request: Request):
    async with request.app.state.sessionmaker() as session:
        yield session

async def init_db(engine: AsyncEngine, seed: bool = False):
    """Idempotent schema creation, optionally followed by default rows."""
    # Import Models to register them with Base
    from app.models import user, form_master, class_arm, assessment, school, student

    logger.info("Initializing database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed:
        from app.services.seed_service import seed_defaults
        async with build_sessionmaker(engine)() as session:
            await seed_defaults(session)

    logger.info("Database initialized successfully")
