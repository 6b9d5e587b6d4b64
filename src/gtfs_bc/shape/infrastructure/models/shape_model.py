from sqlalchemy import Column, String, Float, Integer, ForeignKey, Index
from core.base import Base


class ShapePointModel(Base):
    """SQLAlchemy model for GTFS Shape points."""

    __tablename__ = "gtfs_shape_points"

    # Composite primary key, shape ids are only unique within an agency
    agency_id = Column(String(100), ForeignKey("gtfs_agencies.id"), primary_key=True)
    shape_id = Column(String(100), primary_key=True)
    sequence = Column(Integer, primary_key=True)

    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    dist_traveled = Column(Float, nullable=True)

    __table_args__ = (
        Index("ix_shape_points_agency_shape", "agency_id", "shape_id"),
    )
