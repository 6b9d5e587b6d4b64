"""GeoJSON renditions of the shape queries.

Properties shared by every feature:
- agency shapes: agency_name, agency_key
- route shapes: direction_id (when filtered), the route's GTFS fields,
  agency_name, agency_key
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from src.framework.application import Query, QueryHandler
from src.gtfs_bc.agency.infrastructure.repositories import AgencyRepository
from src.gtfs_bc.route.infrastructure.repositories import RouteRepository
from src.gtfs_bc.shape.application.queries.get_shapes_by_route_query import RouteShapesQuery
from src.gtfs_bc.shape.domain.services import shapes_to_geojson
from src.gtfs_bc.shape.infrastructure.repositories import ShapeRepository
from src.gtfs_bc.trip.infrastructure.repositories import TripRepository

logger = logging.getLogger(__name__)

GeoJSON = Dict[str, Any]


@dataclass(frozen=True)
class GetShapesAsGeoJSONQuery(Query):
    agency_id: str


@dataclass(frozen=True)
class GetShapesByRouteAsGeoJSONQuery(RouteShapesQuery):
    pass


class GetShapesAsGeoJSONQueryHandler(QueryHandler[GetShapesAsGeoJSONQuery, GeoJSON]):

    def __init__(
        self,
        agency_repository: AgencyRepository,
        trip_repository: TripRepository,
        shape_repository: ShapeRepository,
    ):
        self.agency_repository = agency_repository
        self.trip_repository = trip_repository
        self.shape_repository = shape_repository

    def handle(self, query: GetShapesAsGeoJSONQuery) -> GeoJSON:
        agency = self.agency_repository.get(query.agency_id)
        properties = agency.to_properties()

        shape_ids = self.trip_repository.get_shape_ids(query.agency_id)
        shapes = self.shape_repository.get_shapes_by_shape_ids(query.agency_id, shape_ids)

        geojson = shapes_to_geojson([shape.to_coordinates() for shape in shapes], properties)
        logger.info(
            f"Agency {query.agency_id}: {len(shapes)} shapes -> "
            f"{len(geojson['features'])} features"
        )
        return geojson


class GetShapesByRouteAsGeoJSONQueryHandler(QueryHandler[GetShapesByRouteAsGeoJSONQuery, GeoJSON]):

    def __init__(
        self,
        agency_repository: AgencyRepository,
        route_repository: RouteRepository,
        trip_repository: TripRepository,
        shape_repository: ShapeRepository,
    ):
        self.agency_repository = agency_repository
        self.route_repository = route_repository
        self.trip_repository = trip_repository
        self.shape_repository = shape_repository

    def handle(self, query: GetShapesByRouteAsGeoJSONQuery) -> GeoJSON:
        trip_filter = query.trip_filter

        properties: Dict[str, Any] = {}
        if query.direction_id is not None:
            properties["direction_id"] = query.direction_id

        route = self.route_repository.get(query.agency_id, query.route_id)
        # Unset GTFS fields are left out, as they are absent from routes.txt
        properties.update(
            {key: value for key, value in route.to_properties().items() if value is not None}
        )

        agency = self.agency_repository.get(query.agency_id)
        properties.update(agency.to_properties())

        shape_ids = self.trip_repository.get_shape_ids(query.agency_id, trip_filter)
        shapes = self.shape_repository.get_shapes_by_shape_ids(query.agency_id, shape_ids)

        geojson = shapes_to_geojson([shape.to_coordinates() for shape in shapes], properties)
        logger.info(
            f"Route {query.route_id} ({query.agency_id}): {len(shapes)} shapes -> "
            f"{len(geojson['features'])} features"
        )
        return geojson
