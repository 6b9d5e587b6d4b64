from sqlalchemy import Column, String, Integer, ForeignKey, Index
from core.base import Base


class FareRuleModel(Base):
    """SQLAlchemy model for GTFS Fare rule (fare_rules.txt)."""

    __tablename__ = "gtfs_fare_rules"

    # fare_rules.txt has no natural key
    id = Column(Integer, primary_key=True, autoincrement=True)
    agency_id = Column(String(100), ForeignKey("gtfs_agencies.id"), nullable=False)
    fare_id = Column(String(100), nullable=False)
    route_id = Column(String(100), nullable=True)
    origin_id = Column(String(100), nullable=True)
    destination_id = Column(String(100), nullable=True)
    contains_id = Column(String(100), nullable=True)

    __table_args__ = (
        Index("ix_fare_rules_agency_route", "agency_id", "route_id"),
    )
