from .agency_repository import AgencyRepository

__all__ = ["AgencyRepository"]
