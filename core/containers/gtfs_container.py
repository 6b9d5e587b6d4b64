from dependency_injector import containers, providers

from core.config import settings
from src.gtfs_bc.agency.infrastructure.repositories import AgencyRepository
from src.gtfs_bc.route.infrastructure.repositories import RouteRepository
from src.gtfs_bc.trip.infrastructure.repositories import TripRepository
from src.gtfs_bc.shape.infrastructure.repositories import ShapeRepository
from src.gtfs_bc.fare.infrastructure.repositories import FareRuleRepository
from src.gtfs_bc.shape.application.queries import (
    GetShapesQueryHandler,
    GetShapeIdsByRouteQueryHandler,
    GetShapesByRouteQueryHandler,
    GetShapesAsGeoJSONQueryHandler,
    GetShapesByRouteAsGeoJSONQueryHandler,
)
from src.gtfs_bc.fare.application.queries import GetFareRulesByRouteQueryHandler


class GTFSContainer(containers.DeclarativeContainer):
    """Dependency injection container for the GTFS query bounded context."""

    # Request session and the factory fan-out workers open their own sessions from
    session = providers.Dependency()
    session_factory = providers.Dependency()

    shape_fetch_max_workers = providers.Object(settings.SHAPE_FETCH_MAX_WORKERS)
    shape_fetch_timeout_seconds = providers.Object(settings.SHAPE_FETCH_TIMEOUT_SECONDS)

    # Repositories
    agency_repository = providers.Factory(AgencyRepository, session=session)
    route_repository = providers.Factory(RouteRepository, session=session)
    trip_repository = providers.Factory(TripRepository, session=session)
    fare_rule_repository = providers.Factory(FareRuleRepository, session=session)
    shape_repository = providers.Factory(
        ShapeRepository,
        session=session,
        session_factory=session_factory,
        max_workers=shape_fetch_max_workers,
        timeout_seconds=shape_fetch_timeout_seconds,
    )

    # Query Handlers (named in snake_case for QueryBus convention)
    get_shapes_query_handler = providers.Factory(
        GetShapesQueryHandler,
        trip_repository=trip_repository,
        shape_repository=shape_repository,
    )

    get_shape_ids_by_route_query_handler = providers.Factory(
        GetShapeIdsByRouteQueryHandler,
        trip_repository=trip_repository,
    )

    get_shapes_by_route_query_handler = providers.Factory(
        GetShapesByRouteQueryHandler,
        trip_repository=trip_repository,
        shape_repository=shape_repository,
    )

    get_shapes_as_geo_json_query_handler = providers.Factory(
        GetShapesAsGeoJSONQueryHandler,
        agency_repository=agency_repository,
        trip_repository=trip_repository,
        shape_repository=shape_repository,
    )

    get_shapes_by_route_as_geo_json_query_handler = providers.Factory(
        GetShapesByRouteAsGeoJSONQueryHandler,
        agency_repository=agency_repository,
        route_repository=route_repository,
        trip_repository=trip_repository,
        shape_repository=shape_repository,
    )

    get_fare_rules_by_route_query_handler = providers.Factory(
        GetFareRulesByRouteQueryHandler,
        fare_rule_repository=fare_rule_repository,
    )
