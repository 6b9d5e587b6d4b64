from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class ShapePoint:
    """A single point in a shape."""

    lat: float
    lon: float
    sequence: int
    dist_traveled: Optional[float] = None


@dataclass
class Shape:
    """GTFS Shape entity - represents the path of one trip."""

    id: str
    points: List[ShapePoint] = field(default_factory=list)

    @classmethod
    def from_models(cls, shape_id: str, rows: Iterable) -> "Shape":
        """Create Shape from ShapePointModel rows already ordered by sequence."""
        return cls(
            id=shape_id,
            points=[
                ShapePoint(
                    lat=row.lat,
                    lon=row.lon,
                    sequence=row.sequence,
                    dist_traveled=row.dist_traveled,
                )
                for row in rows
            ],
        )

    def to_coordinates(self) -> List[List[float]]:
        """Return shape as list of [lon, lat] positions (GeoJSON order)."""
        return [[p.lon, p.lat] for p in self.points]

    def __len__(self) -> int:
        return len(self.points)
