"""FastAPI dependencies for the GTFS query endpoints."""

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker
from dependency_injector import providers

from core.containers import GTFSContainer
from core.database import get_db, get_session_factory
from src.framework.application import QueryBus


def get_container(
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
) -> GTFSContainer:
    """Container bound to the request session."""
    container = GTFSContainer()
    container.session.override(providers.Object(db))
    container.session_factory.override(providers.Object(session_factory))
    return container


def get_query_bus(container: GTFSContainer = Depends(get_container)) -> QueryBus:
    return QueryBus(container)
