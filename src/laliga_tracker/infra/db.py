# Directory: src/laliga_tracker/infra/db.py
import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy_utils import database_exists, create_database

from laliga_tracker.domain.errors import StorageError
from laliga_tracker.infra.models import Base

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


class Database:
    """
    Owns the engine and session factory for one process. Built once at
    startup and disposed at shutdown; components receive its session_factory.
    """
    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        engine_kwargs = {"echo": echo}
        if self.url.drivername.startswith("sqlite"):
            # requests run in a threadpool, so connections cross threads
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                # every session has to see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory: SessionFactory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def init_db(self) -> None:
        """Create the database if it doesn't exist, then all tables."""
        try:
            if not database_exists(self.engine.url):
                logger.info(f"Creating database {self.engine.url.render_as_string(hide_password=True)}")
                create_database(self.engine.url)
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialise database: {e}")
            raise StorageError(f"Failed to initialise database: {e}") from e

    def dispose(self) -> None:
        self.engine.dispose()


@contextmanager
def session_scope(session_factory: SessionFactory) -> Iterator[Session]:
    """
    One session per logical operation: commit on success, roll back and
    raise StorageError on any database failure, always close.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Storage failure: {e}")
        raise StorageError(f"Storage failure: {e}") from e
    finally:
        session.close()
