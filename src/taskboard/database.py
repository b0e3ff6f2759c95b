# taskboard/database.py
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

from taskboard.config import Settings


def build_engine(settings: Settings) -> Engine:
    if settings.database_url.startswith("sqlite"):
        return create_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,  # Enable connection pool pre-ping
        pool_size=5,
        max_overflow=10,
    )


# Create all tables
def create_db_and_tables(engine: Engine) -> None:
    # Table models must be imported before create_all sees them
    from taskboard.models import board, label, permissions, project, task, task_list, user  # noqa: F401

    SQLModel.metadata.create_all(engine)


# Session manager
@contextmanager
def get_session(engine: Engine):
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()


# Function to verify database connection
def verify_database_connection(engine: Engine) -> bool:
    try:
        with get_session(engine) as session:
            session.exec(text("SELECT 1"))
            return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


# Initialize database
def init_db(engine: Engine) -> None:
    create_db_and_tables(engine)
    if verify_database_connection(engine):
        logger.info("Database initialized successfully")
    else:
        logger.error("Database initialization failed")
