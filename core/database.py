from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Type, Optional, Generator, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import logging

from core.config import settings

logger = logging.getLogger(__name__)


def engine_options(url: str) -> Dict[str, Any]:
    """Engine keyword arguments for the given database URL.

    SQLite pools do not accept sizing arguments, and its connections must be
    usable from the shape fan-out worker threads.
    """
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "echo": False}
    return {
        "pool_size": 20,
        "max_overflow": 30,
        "pool_timeout": 30,
        "pool_recycle": 3600,
        "pool_pre_ping": True,
        "echo": False,
    }


# Database engine configuration
engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Generic type for entities
T = TypeVar('T')


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a read-only database session."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_session_factory() -> sessionmaker:
    """Dependency that provides the factory used by fan-out workers."""
    return SessionLocal


class RepositoryInterface(ABC, Generic[T]):
    """Generic read-only interface for repositories."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Get entity by ID."""
        pass


class BaseRepository(RepositoryInterface[T]):
    """Base repository implementation over a single session."""

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def get_by_id(self, entity_id: str) -> Optional[T]:
        return self.session.query(self.model).filter(
            self.model.id == entity_id  # type: ignore
        ).first()
