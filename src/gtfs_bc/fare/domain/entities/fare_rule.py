from dataclasses import dataclass
from typing import Optional


@dataclass
class FareRule:
    """GTFS Fare rule - ties a fare to a route and/or zones."""

    fare_id: str
    route_id: Optional[str] = None
    origin_id: Optional[str] = None
    destination_id: Optional[str] = None
    contains_id: Optional[str] = None

    @classmethod
    def from_model(cls, model) -> "FareRule":
        """Create FareRule from a FareRuleModel row."""
        return cls(
            fare_id=model.fare_id,
            route_id=model.route_id,
            origin_id=model.origin_id,
            destination_id=model.destination_id,
            contains_id=model.contains_id,
        )
