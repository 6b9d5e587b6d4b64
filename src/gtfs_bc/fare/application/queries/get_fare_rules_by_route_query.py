from dataclasses import dataclass
from typing import List

from src.framework.application import Query, QueryHandler
from src.gtfs_bc.fare.domain.entities import FareRule
from src.gtfs_bc.fare.infrastructure.repositories import FareRuleRepository


@dataclass(frozen=True)
class GetFareRulesByRouteQuery(Query):
    """Fare rules of an agency for one route."""

    agency_id: str
    route_id: str


class GetFareRulesByRouteQueryHandler(QueryHandler[GetFareRulesByRouteQuery, List[FareRule]]):

    def __init__(self, fare_rule_repository: FareRuleRepository):
        self.fare_rule_repository = fare_rule_repository

    def handle(self, query: GetFareRulesByRouteQuery) -> List[FareRule]:
        return self.fare_rule_repository.get_by_route(query.agency_id, query.route_id)
