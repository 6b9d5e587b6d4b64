from sqlalchemy import Column, String, Integer, ForeignKey, ForeignKeyConstraint, Index
from core.base import Base


class TripModel(Base):
    """SQLAlchemy model for GTFS Trip."""

    __tablename__ = "gtfs_trips"

    # Composite primary key, trip ids are only unique within an agency
    agency_id = Column(String(100), ForeignKey("gtfs_agencies.id"), primary_key=True)
    id = Column(String(100), primary_key=True)
    route_id = Column(String(100), nullable=False)
    service_id = Column(String(100), nullable=False)
    headsign = Column(String(255), nullable=True)
    short_name = Column(String(100), nullable=True)
    direction_id = Column(Integer, nullable=True)  # 0 = outbound, 1 = inbound
    block_id = Column(String(100), nullable=True)
    shape_id = Column(String(100), nullable=True)

    __table_args__ = (
        ForeignKeyConstraint(
            ["agency_id", "route_id"],
            ["gtfs_routes.agency_id", "gtfs_routes.id"],
        ),
        Index("ix_trips_agency_route", "agency_id", "route_id"),
    )
