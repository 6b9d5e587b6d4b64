from dataclasses import dataclass
from typing import List

from src.framework.application import Query, QueryHandler
from src.gtfs_bc.shape.domain.entities import Shape
from src.gtfs_bc.shape.infrastructure.repositories import ShapeRepository
from src.gtfs_bc.trip.infrastructure.repositories import TripRepository


@dataclass(frozen=True)
class GetShapesQuery(Query):
    """All shapes drawn by the agency's trips."""

    agency_id: str


class GetShapesQueryHandler(QueryHandler[GetShapesQuery, List[Shape]]):

    def __init__(self, trip_repository: TripRepository, shape_repository: ShapeRepository):
        self.trip_repository = trip_repository
        self.shape_repository = shape_repository

    def handle(self, query: GetShapesQuery) -> List[Shape]:
        shape_ids = self.trip_repository.get_shape_ids(query.agency_id)
        return self.shape_repository.get_shapes_by_shape_ids(query.agency_id, shape_ids)
