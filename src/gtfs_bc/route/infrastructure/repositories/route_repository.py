from typing import Optional

from sqlalchemy.orm import Session

from core.database import BaseRepository
from core.exceptions import NotFoundError
from src.gtfs_bc.route.domain.entities import Route
from src.gtfs_bc.route.infrastructure.models import RouteModel


class RouteRepository(BaseRepository[RouteModel]):
    """Read access to routes, always scoped to an agency."""

    def __init__(self, session: Session):
        super().__init__(session, RouteModel)

    def find(self, agency_id: str, route_id: str) -> Optional[Route]:
        model = self.session.query(RouteModel).filter(
            RouteModel.agency_id == agency_id,
            RouteModel.id == route_id,
        ).first()
        return Route.from_model(model) if model else None

    def get(self, agency_id: str, route_id: str) -> Route:
        """Route by id within the agency, raises NotFoundError if missing."""
        route = self.find(agency_id, route_id)
        if route is None:
            raise NotFoundError(f"Route {route_id} not found for agency {agency_id}")
        return route
