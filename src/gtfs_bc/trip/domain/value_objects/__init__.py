from .trip_filter import TripFilter, DIRECTION_IDS

__all__ = ["TripFilter", "DIRECTION_IDS"]
