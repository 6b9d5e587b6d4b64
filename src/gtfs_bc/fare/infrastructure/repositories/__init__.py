from .fare_rule_repository import FareRuleRepository

__all__ = ["FareRuleRepository"]
