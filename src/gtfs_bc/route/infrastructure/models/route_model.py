from sqlalchemy import Column, String, Integer, ForeignKey
from core.base import Base


class RouteModel(Base):
    """SQLAlchemy model for GTFS Route."""

    __tablename__ = "gtfs_routes"

    # Composite primary key, route ids are only unique within an agency
    agency_id = Column(String(100), ForeignKey("gtfs_agencies.id"), primary_key=True)
    id = Column(String(100), primary_key=True)
    short_name = Column(String(50), nullable=False)
    long_name = Column(String(255), nullable=False)
    route_type = Column(Integer, nullable=False, default=3)  # 3 = Bus
    color = Column(String(6), nullable=True)  # Hex color without #
    text_color = Column(String(6), nullable=True)
    description = Column(String(500), nullable=True)
    url = Column(String(500), nullable=True)
    sort_order = Column(Integer, nullable=True)
