from typing import List
from fastapi import APIRouter, Depends, Request

from core.rate_limiter import limiter, RateLimits
from adapters.http.api.gtfs.dependencies import get_query_bus
from adapters.http.api.gtfs.schemas import FareRuleResponse
from src.framework.application import QueryBus
from src.gtfs_bc.fare.application.queries import GetFareRulesByRouteQuery


router = APIRouter(prefix="/gtfs/agencies/{agency_id}", tags=["GTFS Fares"])


@router.get("/routes/{route_id}/fare-rules", response_model=List[FareRuleResponse])
@limiter.limit(RateLimits.FARE_RULES)
def get_route_fare_rules(
    request: Request,
    agency_id: str,
    route_id: str,
    bus: QueryBus = Depends(get_query_bus),
):
    """Get the fare rules that apply to a route (fare_rules.txt)."""
    return bus.query(GetFareRulesByRouteQuery(agency_id=agency_id, route_id=route_id))
