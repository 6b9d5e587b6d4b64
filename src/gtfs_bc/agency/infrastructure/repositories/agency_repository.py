from typing import Optional

from sqlalchemy.orm import Session

from core.database import BaseRepository
from core.exceptions import NotFoundError
from src.gtfs_bc.agency.domain.entities import Agency
from src.gtfs_bc.agency.infrastructure.models import AgencyModel


class AgencyRepository(BaseRepository[AgencyModel]):
    """Read access to agencies."""

    def __init__(self, session: Session):
        super().__init__(session, AgencyModel)

    def find(self, agency_id: str) -> Optional[Agency]:
        model = self.get_by_id(agency_id)
        return Agency.from_model(model) if model else None

    def get(self, agency_id: str) -> Agency:
        """Agency by id, raises NotFoundError if it does not exist."""
        agency = self.find(agency_id)
        if agency is None:
            raise NotFoundError(f"Agency {agency_id} not found")
        return agency
