from dataclasses import dataclass
from typing import Optional


@dataclass
class Route:
    """GTFS Route entity - represents a transit route/line."""

    id: str
    agency_id: str
    short_name: str
    long_name: str
    route_type: int
    color: Optional[str] = None
    text_color: Optional[str] = None
    desc: Optional[str] = None
    url: Optional[str] = None
    sort_order: Optional[int] = None

    @classmethod
    def from_model(cls, model) -> "Route":
        """Create Route from a RouteModel row."""
        return cls(
            id=model.id,
            agency_id=model.agency_id,
            short_name=model.short_name,
            long_name=model.long_name,
            route_type=model.route_type,
            color=model.color,
            text_color=model.text_color,
            desc=model.description,
            url=model.url,
            sort_order=model.sort_order,
        )

    def to_properties(self) -> dict:
        """Route fields keyed by their GTFS column names (routes.txt)."""
        return {
            "route_id": self.id,
            "agency_id": self.agency_id,
            "route_short_name": self.short_name,
            "route_long_name": self.long_name,
            "route_type": self.route_type,
            "route_color": self.color,
            "route_text_color": self.text_color,
            "route_desc": self.desc,
            "route_url": self.url,
            "route_sort_order": self.sort_order,
        }
