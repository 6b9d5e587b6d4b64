from .fare_rule import FareRule

__all__ = ["FareRule"]
