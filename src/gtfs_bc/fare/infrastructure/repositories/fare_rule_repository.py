from typing import List

from sqlalchemy.orm import Session

from src.gtfs_bc.fare.domain.entities import FareRule
from src.gtfs_bc.fare.infrastructure.models import FareRuleModel


class FareRuleRepository:
    """Read access to fare rules."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_route(self, agency_id: str, route_id: str) -> List[FareRule]:
        """Fare rules of the agency that name ``route_id``."""
        rows = (
            self.session.query(FareRuleModel)
            .filter(
                FareRuleModel.agency_id == agency_id,
                FareRuleModel.route_id == route_id,
            )
            .order_by(FareRuleModel.id)
            .all()
        )
        return [FareRule.from_model(row) for row in rows]
