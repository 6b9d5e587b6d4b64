"""Unit tests for shape consolidation and GeoJSON formatting."""

import json
import random

import pytest

from src.gtfs_bc.shape.domain.services import (
    consolidate_shapes,
    shapes_to_geojson,
    segment_key,
)


A = [0.0, 0.0]
B = [1.0, 0.0]
C = [2.0, 0.0]
D = [1.0, 1.0]
E = [3.0, 0.0]
X = [0.0, 1.0]


def segments(lines):
    """Directed segment keys of every line, in walk order."""
    return [segment_key(line[i], line[i + 1]) for line in lines for i in range(len(line) - 1)]


class TestSegmentKey:
    """Tests for directed segment identity."""

    def test_same_points_same_key(self):
        assert segment_key(A, B) == segment_key([0.0, 0.0], [1.0, 0.0])

    def test_direction_matters(self):
        """A -> B and B -> A are different segments."""
        assert segment_key(A, B) != segment_key(B, A)


class TestConsolidateShapes:
    """Tests for consolidate_shapes."""

    def test_empty_input(self):
        assert consolidate_shapes([]) == []

    def test_single_shape_unchanged(self):
        """A shape with no repeated segment comes back as one line."""
        shape = [A, B, C, E]
        assert consolidate_shapes([shape]) == [[A, B, C, E]]

    def test_single_point_shape_dropped(self):
        assert consolidate_shapes([[A]]) == []

    def test_empty_shape_dropped(self):
        assert consolidate_shapes([[], [A, B]]) == [[A, B]]

    def test_identical_shapes_collapse(self):
        """A complete overlap adds nothing."""
        shape = [A, B, C]
        assert consolidate_shapes([shape, list(shape)]) == consolidate_shapes([shape])

    def test_shared_prefix_then_diverge(self):
        """A->B->C and A->B->D give the first shape and the diverging tail."""
        result = consolidate_shapes([[A, B, C], [A, B, D]])
        assert result == [[A, B, C], [B, D]]
        assert len(set(segments(result))) == 3

    def test_processing_order_decides_owner(self):
        result = consolidate_shapes([[A, B, D], [A, B, C]])
        assert result == [[A, B, D], [B, C]]

    def test_reverse_direction_is_not_overlap(self):
        """Opposite directions of the same street are both kept."""
        result = consolidate_shapes([[A, B, C], [C, B, A]])
        assert result == [[A, B, C], [C, B, A]]

    def test_collision_at_last_segment(self):
        """The line keeps every point up to the start of the claimed segment."""
        result = consolidate_shapes([[B, C], [X, A, B, C]])
        assert result == [[B, C], [X, A, B]]

    def test_collision_at_last_segment_of_two_point_line(self):
        result = consolidate_shapes([[A, B], [A, B]])
        assert result == [[A, B]]

    def test_reconverging_shape_keeps_lead_in(self):
        """The segment leading into a shared section is not lost."""
        result = consolidate_shapes([[A, B, C, E], [X, B, C, D]])
        assert result == [[A, B, C, E], [X, B], [C, D]]

    def test_shared_middle_section(self):
        result = consolidate_shapes([[X, A, B, C, E], [D, A, B, C, X]])
        assert result == [[X, A, B, C, E], [D, A], [C, X]]

    def test_repeated_segment_within_one_shape(self):
        """A loop that retraces itself is split too."""
        result = consolidate_shapes([[A, B, A, B, C]])
        assert result == [[A, B, A], [B, C]]

    def test_input_not_modified(self):
        first = [A, B, C]
        second = [A, B, D]
        consolidate_shapes([first, second])
        assert first == [A, B, C]
        assert second == [A, B, D]

    def test_accepts_tuples(self):
        result = consolidate_shapes([[(0.0, 0.0), (1.0, 0.0)], [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]])
        assert result == [[(0.0, 0.0), (1.0, 0.0)], [(1.0, 0.0), (1.0, 1.0)]]

    def test_deterministic(self):
        shapes = [[A, B, C, E], [X, B, C, D], [A, B, D]]
        assert consolidate_shapes(shapes) == consolidate_shapes(shapes)


class TestConsolidationProperties:
    """Coverage invariants over generated shapes on a small grid."""

    @staticmethod
    def _random_shapes(rng):
        grid = [[float(x), float(y)] for x in range(3) for y in range(3)]
        return [
            [rng.choice(grid) for _ in range(rng.randint(0, 8))]
            for _ in range(rng.randint(0, 6))
        ]

    @pytest.mark.parametrize("seed", range(25))
    def test_every_line_has_two_points(self, seed):
        shapes = self._random_shapes(random.Random(seed))
        assert all(len(line) >= 2 for line in consolidate_shapes(shapes))

    @pytest.mark.parametrize("seed", range(25))
    def test_segments_kept_once_and_none_lost(self, seed):
        shapes = self._random_shapes(random.Random(seed))
        output_segments = segments(consolidate_shapes(shapes))

        assert len(output_segments) == len(set(output_segments))
        assert set(output_segments) == set(segments(shapes))


class TestShapesToGeoJSON:
    """Tests for shapes_to_geojson."""

    def test_feature_collection_structure(self):
        properties = {"agency_key": "ttc"}
        geojson = shapes_to_geojson([[A, B, C]], properties)

        assert geojson == {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "geometry": {"type": "LineString", "coordinates": [A, B, C]},
                    "properties": {"agency_key": "ttc"},
                }
            ],
        }

    def test_empty_shapes(self):
        geojson = shapes_to_geojson([], {"agency_key": "ttc"})
        assert geojson == {"type": "FeatureCollection", "features": []}

    def test_properties_default_to_empty(self):
        geojson = shapes_to_geojson([[A, B]])
        assert geojson["features"][0]["properties"] == {}

    def test_features_share_properties(self):
        properties = {"route_id": "R1"}
        geojson = shapes_to_geojson([[A, B, C], [A, B, D]], properties)

        assert len(geojson["features"]) == 2
        assert all(f["properties"] is properties for f in geojson["features"])

    def test_consolidates_before_formatting(self):
        geojson = shapes_to_geojson([[A, B, C], [A, B, C], [A]])
        assert len(geojson["features"]) == 1

    def test_coordinates_preserved_exactly(self):
        """Values and [lon, lat] order survive JSON serialisation untouched."""
        shape = [[-122.41941550000001, 37.7749295], [-122.4194, 37.77493], [151.2093, -33.8688]]
        geojson = json.loads(json.dumps(shapes_to_geojson([shape])))

        assert geojson["features"][0]["geometry"]["coordinates"] == shape
