"""Shape-related response schemas."""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel


class ShapePointResponse(BaseModel):
    """A single point in a shape."""
    lat: float
    lon: float
    sequence: int
    dist_traveled: Optional[float] = None

    class Config:
        from_attributes = True


class ShapeResponse(BaseModel):
    """Ordered points of one trip shape."""
    shape_id: str
    points: List[ShapePointResponse]


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[List[float]]  # [lon, lat]


class FeatureResponse(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: LineStringGeometry
    properties: Dict[str, Any]


class FeatureCollectionResponse(BaseModel):
    """Consolidated shapes as a GeoJSON FeatureCollection."""
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[FeatureResponse]
