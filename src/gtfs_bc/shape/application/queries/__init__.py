from .get_shapes_query import GetShapesQuery, GetShapesQueryHandler
from .get_shapes_by_route_query import (
    RouteShapesQuery,
    GetShapeIdsByRouteQuery,
    GetShapeIdsByRouteQueryHandler,
    GetShapesByRouteQuery,
    GetShapesByRouteQueryHandler,
)
from .get_shapes_geojson_query import (
    GetShapesAsGeoJSONQuery,
    GetShapesAsGeoJSONQueryHandler,
    GetShapesByRouteAsGeoJSONQuery,
    GetShapesByRouteAsGeoJSONQueryHandler,
)

__all__ = [
    "GetShapesQuery",
    "GetShapesQueryHandler",
    "RouteShapesQuery",
    "GetShapeIdsByRouteQuery",
    "GetShapeIdsByRouteQueryHandler",
    "GetShapesByRouteQuery",
    "GetShapesByRouteQueryHandler",
    "GetShapesAsGeoJSONQuery",
    "GetShapesAsGeoJSONQueryHandler",
    "GetShapesByRouteAsGeoJSONQuery",
    "GetShapesByRouteAsGeoJSONQueryHandler",
]
