from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request

from core.rate_limiter import limiter, RateLimits
from adapters.http.api.gtfs.dependencies import get_query_bus
from adapters.http.api.gtfs.schemas import (
    ShapePointResponse,
    ShapeResponse,
    FeatureCollectionResponse,
)
from src.framework.application import QueryBus
from src.gtfs_bc.shape.application.queries import (
    GetShapesQuery,
    GetShapesAsGeoJSONQuery,
    GetShapeIdsByRouteQuery,
    GetShapesByRouteQuery,
    GetShapesByRouteAsGeoJSONQuery,
)


router = APIRouter(prefix="/gtfs/agencies/{agency_id}", tags=["GTFS Shapes"])


def _to_shape_responses(shapes) -> List[ShapeResponse]:
    return [
        ShapeResponse(
            shape_id=shape.id,
            points=[ShapePointResponse.model_validate(p) for p in shape.points],
        )
        for shape in shapes
    ]


def _service_ids(service_id: Optional[List[str]]) -> tuple:
    return tuple(service_id or ())


@router.get("/shapes", response_model=List[ShapeResponse])
@limiter.limit(RateLimits.SHAPES)
def get_shapes(
    request: Request,
    agency_id: str,
    bus: QueryBus = Depends(get_query_bus),
):
    """Get the shape of every trip of an agency.

    Shapes are ordered by shape_id, points by shape_pt_sequence.
    Returns 404 if one of the trips references a shape without points.
    """
    shapes = bus.query(GetShapesQuery(agency_id=agency_id))
    return _to_shape_responses(shapes)


@router.get("/shapes/geojson", response_model=FeatureCollectionResponse)
@limiter.limit(RateLimits.GEOJSON)
def get_shapes_geojson(
    request: Request,
    agency_id: str,
    bus: QueryBus = Depends(get_query_bus),
):
    """Get the agency's shapes as a GeoJSON FeatureCollection.

    Overlapping trip shapes are consolidated so every street section is drawn
    once. Every feature carries the agency name and key as properties.
    """
    return bus.query(GetShapesAsGeoJSONQuery(agency_id=agency_id))


@router.get("/routes/{route_id}/shape-ids", response_model=List[str])
@limiter.limit(RateLimits.SHAPE_IDS)
def get_route_shape_ids(
    request: Request,
    agency_id: str,
    route_id: str,
    direction_id: Optional[int] = Query(None, ge=0, le=1, description="0 = outbound, 1 = inbound"),
    service_id: Optional[List[str]] = Query(None, description="Only trips running on these services"),
    bus: QueryBus = Depends(get_query_bus),
):
    """Get the distinct shape ids used by a route's trips."""
    return bus.query(GetShapeIdsByRouteQuery(
        agency_id=agency_id,
        route_id=route_id,
        direction_id=direction_id,
        service_ids=_service_ids(service_id),
    ))


@router.get("/routes/{route_id}/shapes", response_model=List[ShapeResponse])
@limiter.limit(RateLimits.SHAPES)
def get_route_shapes(
    request: Request,
    agency_id: str,
    route_id: str,
    direction_id: Optional[int] = Query(None, ge=0, le=1, description="0 = outbound, 1 = inbound"),
    service_id: Optional[List[str]] = Query(None, description="Only trips running on these services"),
    bus: QueryBus = Depends(get_query_bus),
):
    """Get the shapes of a route, optionally for one direction and some services."""
    shapes = bus.query(GetShapesByRouteQuery(
        agency_id=agency_id,
        route_id=route_id,
        direction_id=direction_id,
        service_ids=_service_ids(service_id),
    ))
    return _to_shape_responses(shapes)


@router.get("/routes/{route_id}/shapes/geojson", response_model=FeatureCollectionResponse)
@limiter.limit(RateLimits.GEOJSON)
def get_route_shapes_geojson(
    request: Request,
    agency_id: str,
    route_id: str,
    direction_id: Optional[int] = Query(None, ge=0, le=1, description="0 = outbound, 1 = inbound"),
    service_id: Optional[List[str]] = Query(None, description="Only trips running on these services"),
    bus: QueryBus = Depends(get_query_bus),
):
    """Get a route's shapes as a GeoJSON FeatureCollection.

    Feature properties hold the route fields (routes.txt names), the agency
    name and key, and direction_id when filtering by direction.
    Returns 404 if the agency or route does not exist.
    """
    return bus.query(GetShapesByRouteAsGeoJSONQuery(
        agency_id=agency_id,
        route_id=route_id,
        direction_id=direction_id,
        service_ids=_service_ids(service_id),
    ))
