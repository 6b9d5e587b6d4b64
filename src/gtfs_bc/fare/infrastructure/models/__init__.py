from .fare_rule_model import FareRuleModel

__all__ = ["FareRuleModel"]
