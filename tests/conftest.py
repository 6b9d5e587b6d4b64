"""Pytest configuration and fixtures."""

import os

# Must be set before core.config is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import models  # noqa: F401  registers every table on Base.metadata
from app import app
from core.base import Base
from core.containers import GTFSContainer
from core.database import engine_options, get_db, get_session_factory
from src.framework.application import QueryBus
from src.gtfs_bc.agency.infrastructure.models import AgencyModel
from src.gtfs_bc.route.infrastructure.models import RouteModel
from src.gtfs_bc.trip.infrastructure.models import TripModel
from src.gtfs_bc.shape.infrastructure.models import ShapePointModel
from src.gtfs_bc.fare.infrastructure.models import FareRuleModel


# (lon, lat) positions used by the seeded shapes
A = (0.0, 0.0)
B = (1.0, 0.0)
C = (2.0, 0.0)
D = (1.0, 1.0)

SHAPES = {
    # agency, shape_id: points in travel order
    ("ttc", "S1"): [A, B, C],
    ("ttc", "S2"): [C, B, A],
    ("ttc", "S3"): [A, B, D],
    ("other", "S1"): [D, C],
}


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite so fan-out workers can open their own connections."""
    url = f"sqlite:///{tmp_path / 'gtfs.db'}"
    test_engine = create_engine(url, **engine_options(url))
    Base.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def gtfs_data(session_factory):
    """Seed two agencies with routes, trips, shapes and fare rules."""
    session = session_factory()
    session.add_all([
        AgencyModel(id="ttc", name="Test Transit"),
        AgencyModel(id="other", name="Other Transit"),
        AgencyModel(id="broken", name="Broken Transit"),
    ])
    session.flush()
    session.add_all([
        RouteModel(id="R1", agency_id="ttc", short_name="1", long_name="Main Street",
                   route_type=3, color="FF0000"),
        RouteModel(id="R2", agency_id="ttc", short_name="2", long_name="Harbour", route_type=4),
        RouteModel(id="R9", agency_id="other", short_name="9", long_name="Other line", route_type=3),
        RouteModel(id="B1", agency_id="broken", short_name="B", long_name="Broken line", route_type=3),
    ])
    session.flush()
    session.add_all([
        TripModel(id="T1", agency_id="ttc", route_id="R1", service_id="WK", direction_id=0, shape_id="S1"),
        TripModel(id="T2", agency_id="ttc", route_id="R1", service_id="WK", direction_id=0, shape_id="S1"),
        TripModel(id="T3", agency_id="ttc", route_id="R1", service_id="WE", direction_id=1, shape_id="S2"),
        TripModel(id="T4", agency_id="ttc", route_id="R1", service_id="WE", direction_id=0, shape_id="S3"),
        TripModel(id="T5", agency_id="ttc", route_id="R2", service_id="WK", direction_id=0, shape_id=None),
        TripModel(id="T9", agency_id="other", route_id="R9", service_id="WK", direction_id=0, shape_id="S1"),
        TripModel(id="TB", agency_id="broken", route_id="B1", service_id="WK", direction_id=0, shape_id="MISSING"),
    ])
    for (agency_id, shape_id), points in SHAPES.items():
        # Inserted in reverse to check ordering by sequence
        for sequence, (lon, lat) in reversed(list(enumerate(points, start=1))):
            session.add(ShapePointModel(
                agency_id=agency_id, shape_id=shape_id, sequence=sequence,
                lat=lat, lon=lon, dist_traveled=float(sequence - 1),
            ))
    session.add_all([
        FareRuleModel(agency_id="ttc", fare_id="F1", route_id="R1"),
        FareRuleModel(agency_id="ttc", fare_id="F2", route_id="R1", origin_id="Z1", destination_id="Z2"),
        FareRuleModel(agency_id="ttc", fare_id="F3", route_id="R2"),
        FareRuleModel(agency_id="other", fare_id="F9", route_id="R1"),
    ])
    session.commit()
    session.close()


@pytest.fixture
def db_session(session_factory, gtfs_data):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def container(db_session, session_factory):
    """GTFS container bound to the seeded test database."""
    gtfs_container = GTFSContainer()
    gtfs_container.session.override(providers.Object(db_session))
    gtfs_container.session_factory.override(providers.Object(session_factory))
    return gtfs_container


@pytest.fixture
def query_bus(container):
    return QueryBus(container)


@pytest.fixture
def client(session_factory, gtfs_data):
    """Create a test client for the FastAPI app backed by the seeded database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def api_base_url():
    """Base URL for GTFS API endpoints."""
    return "/api/v1/gtfs"
