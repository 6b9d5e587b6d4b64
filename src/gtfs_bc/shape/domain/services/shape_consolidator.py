"""Shape consolidation for map rendering.

Trips on the same route usually retrace the same streets, so drawing every
trip shape paints the same road many times. Consolidation splits the shapes
wherever they rejoin an already drawn path, keeping each directed segment
exactly once and leaving the geometry itself untouched.
"""

import logging
from collections import deque
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# [lon, lat]
Point = Sequence[float]
LineString = List[Point]
SegmentKey = Tuple[float, float, float, float]


def segment_key(start: Point, end: Point) -> SegmentKey:
    """Key of the directed segment start -> end.

    Order-sensitive: the segment B -> A has a different key than A -> B.
    """
    return (start[0], start[1], end[0], end[1])


def consolidate_shapes(shapes: Sequence[Sequence[Point]]) -> List[LineString]:
    """Merge overlapping shapes into line strings with no repeated segment.

    Shapes are walked in input order, so earlier shapes claim their segments
    first. When a line reaches a segment that was already claimed, the line
    is cut there: it keeps the points up to the start of that segment, and
    the remainder after the segment is queued as a new line to be walked
    later. Lines left with fewer than 2 points are dropped.

    Args:
        shapes: Point sequences ([lon, lat]) in the order they should claim
            segments. Not modified.

    Returns:
        Line strings in processing order (input shapes first, split
        remainders after), each with at least 2 points.

    Example:
        A->B->C and A->B->D give [A, B, C] and [B, D].
    """
    seen = set()
    queue = deque(list(shape) for shape in shapes)
    processed: List[LineString] = []

    while queue:
        line = queue.popleft()
        i = 0
        while i + 1 < len(line):
            key = segment_key(line[i], line[i + 1])
            if key in seen:
                # line[i] -> line[i + 1] is claimed elsewhere; walk the rest later
                queue.append(line[i + 1:])
                del line[i + 1:]
                break
            seen.add(key)
            i += 1
        processed.append(line)

    line_strings = [line for line in processed if len(line) > 1]

    logger.debug(
        f"Consolidated {len(shapes)} shapes into {len(line_strings)} line strings "
        f"({len(seen)} distinct segments)"
    )
    return line_strings


def shapes_to_geojson(
    shapes: Sequence[Sequence[Point]],
    properties: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Render shapes as a GeoJSON FeatureCollection of consolidated lines.

    Every feature shares the same ``properties`` object. Coordinates are
    copied as given, no geometry validation is done.
    """
    if properties is None:
        properties = {}

    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": line_string,
                },
                "properties": properties,
            }
            for line_string in consolidate_shapes(shapes)
        ],
    }
