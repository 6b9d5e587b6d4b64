import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from src.gtfs_bc.trip.domain.value_objects import TripFilter
from src.gtfs_bc.trip.infrastructure.models import TripModel

logger = logging.getLogger(__name__)


class TripRepository:
    """Read access to trips, used to resolve which shapes a route draws."""

    def __init__(self, session: Session):
        self.session = session

    def get_shape_ids(self, agency_id: str, trip_filter: Optional[TripFilter] = None) -> List[str]:
        """Distinct shape ids of the agency's trips matching ``trip_filter``.

        Trips without a shape are ignored. Ids are sorted so the shapes are
        always consolidated in the same order.
        """
        trip_filter = trip_filter or TripFilter()

        query = self.session.query(TripModel.shape_id).filter(
            TripModel.agency_id == agency_id,
            TripModel.shape_id.isnot(None),
            TripModel.shape_id != "",
        )

        if trip_filter.route_id is not None:
            query = query.filter(TripModel.route_id == trip_filter.route_id)

        # Use direction_id if specified, else match all directions
        if trip_filter.direction_id is not None:
            query = query.filter(TripModel.direction_id == trip_filter.direction_id)

        if trip_filter.service_ids:
            query = query.filter(TripModel.service_id.in_(trip_filter.service_ids))

        shape_ids = sorted(row.shape_id for row in query.distinct().all())
        logger.debug(f"Resolved {len(shape_ids)} shape ids for agency {agency_id} ({trip_filter})")
        return shape_ids
