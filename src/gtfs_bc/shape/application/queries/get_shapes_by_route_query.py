from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from src.framework.application import Query, QueryHandler
from src.gtfs_bc.shape.domain.entities import Shape
from src.gtfs_bc.shape.infrastructure.repositories import ShapeRepository
from src.gtfs_bc.trip.domain.value_objects import TripFilter
from src.gtfs_bc.trip.infrastructure.repositories import TripRepository


@dataclass(frozen=True)
class RouteShapesQuery(Query):
    """Shapes of one route, optionally narrowed by direction and services."""

    agency_id: str
    route_id: str
    direction_id: Optional[int] = None
    service_ids: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def trip_filter(self) -> TripFilter:
        return TripFilter.for_route(self.route_id, self.direction_id, self.service_ids)


@dataclass(frozen=True)
class GetShapeIdsByRouteQuery(RouteShapesQuery):
    pass


@dataclass(frozen=True)
class GetShapesByRouteQuery(RouteShapesQuery):
    pass


class GetShapeIdsByRouteQueryHandler(QueryHandler[GetShapeIdsByRouteQuery, List[str]]):

    def __init__(self, trip_repository: TripRepository):
        self.trip_repository = trip_repository

    def handle(self, query: GetShapeIdsByRouteQuery) -> List[str]:
        return self.trip_repository.get_shape_ids(query.agency_id, query.trip_filter)


class GetShapesByRouteQueryHandler(QueryHandler[GetShapesByRouteQuery, List[Shape]]):

    def __init__(self, trip_repository: TripRepository, shape_repository: ShapeRepository):
        self.trip_repository = trip_repository
        self.shape_repository = shape_repository

    def handle(self, query: GetShapesByRouteQuery) -> List[Shape]:
        shape_ids = self.trip_repository.get_shape_ids(query.agency_id, query.trip_filter)
        return self.shape_repository.get_shapes_by_shape_ids(query.agency_id, shape_ids)
