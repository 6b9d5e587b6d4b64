"""Unit tests for QueryBus handler resolution."""

from dataclasses import dataclass

import pytest
from dependency_injector import containers, providers

from core.containers import GTFSContainer
from src.framework.application import Query, QueryHandler, QueryBus
from src.gtfs_bc.shape.application.queries import (
    GetShapesQuery,
    GetShapeIdsByRouteQuery,
    GetShapesByRouteQuery,
    GetShapesAsGeoJSONQuery,
    GetShapesByRouteAsGeoJSONQuery,
)
from src.gtfs_bc.fare.application.queries import GetFareRulesByRouteQuery


@dataclass(frozen=True)
class EchoQuery(Query):
    value: str


class EchoQueryHandler(QueryHandler[EchoQuery, str]):

    def handle(self, query: EchoQuery) -> str:
        return query.value


class EchoContainer(containers.DeclarativeContainer):
    echo_query_handler = providers.Factory(EchoQueryHandler)


class TestQueryBus:
    """Tests for convention-based handler lookup."""

    def test_dispatches_to_handler(self):
        bus = QueryBus(EchoContainer())
        assert bus.query(EchoQuery("hello")) == "hello"

    def test_caches_provider(self):
        bus = QueryBus(EchoContainer())
        bus.query(EchoQuery("a"))
        assert EchoQuery in bus._handlers_cache
        assert bus.query(EchoQuery("b")) == "b"

    def test_missing_handler(self):
        bus = QueryBus(containers.DynamicContainer())
        with pytest.raises(AttributeError):
            bus.query(EchoQuery("x"))

    @pytest.mark.parametrize("name,expected", [
        ("GetShapesQueryHandler", "get_shapes_query_handler"),
        ("GetShapesAsGeoJSONQueryHandler", "get_shapes_as_geo_json_query_handler"),
        ("GetShapeIdsByRouteQueryHandler", "get_shape_ids_by_route_query_handler"),
        ("GetFareRulesByRouteQueryHandler", "get_fare_rules_by_route_query_handler"),
    ])
    def test_camel_to_snake(self, name, expected):
        assert QueryBus._camel_to_snake(name) == expected

    @pytest.mark.parametrize("query_type", [
        GetShapesQuery,
        GetShapeIdsByRouteQuery,
        GetShapesByRouteQuery,
        GetShapesAsGeoJSONQuery,
        GetShapesByRouteAsGeoJSONQuery,
        GetFareRulesByRouteQuery,
    ])
    def test_gtfs_container_has_handler_for_every_query(self, query_type):
        provider_name = QueryBus._camel_to_snake(f"{query_type.__name__}Handler")
        assert provider_name in GTFSContainer.providers
