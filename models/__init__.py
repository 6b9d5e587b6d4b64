# Models registry
# Import all SQLAlchemy models here so Base.metadata knows every table

from src.gtfs_bc.agency.infrastructure.models import AgencyModel
from src.gtfs_bc.route.infrastructure.models import RouteModel
from src.gtfs_bc.trip.infrastructure.models import TripModel
from src.gtfs_bc.shape.infrastructure.models import ShapePointModel
from src.gtfs_bc.fare.infrastructure.models import FareRuleModel

__all__ = [
    "AgencyModel",
    "RouteModel",
    "TripModel",
    "ShapePointModel",
    "FareRuleModel",
]
