from .get_fare_rules_by_route_query import GetFareRulesByRouteQuery, GetFareRulesByRouteQueryHandler

__all__ = ["GetFareRulesByRouteQuery", "GetFareRulesByRouteQueryHandler"]
