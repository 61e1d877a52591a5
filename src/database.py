from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.logger import logger

Base = declarative_base()


class Database:
    """Storage client owning the engine and the session factory.

    Created once at process start, handed to request handlers through
    ``get_db`` and disposed on shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine: Engine = create_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Create all tables that do not exist yet"""
        # Import models so they register on Base.metadata
        from src import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database has not been initialised")
    return database


def get_db(request: Request) -> Iterator[Session]:
    """Yield a request-scoped session"""
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
