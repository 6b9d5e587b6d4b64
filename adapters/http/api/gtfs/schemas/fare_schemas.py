"""Fare-related response schemas."""

from typing import Optional
from pydantic import BaseModel


class FareRuleResponse(BaseModel):
    fare_id: str
    route_id: Optional[str] = None
    origin_id: Optional[str] = None
    destination_id: Optional[str] = None
    contains_id: Optional[str] = None

    class Config:
        from_attributes = True
