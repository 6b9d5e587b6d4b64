from dataclasses import dataclass
from typing import Optional


@dataclass
class Agency:
    """GTFS Agency entity - represents a transit agency."""

    id: str
    name: str
    url: Optional[str] = None
    timezone: str = "UTC"
    lang: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_model(cls, model) -> "Agency":
        """Create Agency from an AgencyModel row."""
        return cls(
            id=model.id,
            name=model.name,
            url=model.url,
            timezone=model.timezone,
            lang=model.lang,
            phone=model.phone,
        )

    def to_properties(self) -> dict:
        """GeoJSON properties identifying this agency."""
        return {
            "agency_name": self.name,
            "agency_key": self.id,
        }
