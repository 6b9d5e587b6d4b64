"""Centralized API schemas for GTFS endpoints."""

import logging

logger = logging.getLogger(__name__)

from .shape_schemas import (
    ShapePointResponse,
    ShapeResponse,
    LineStringGeometry,
    FeatureResponse,
    FeatureCollectionResponse,
)

from .fare_schemas import FareRuleResponse

# Required schemas that must exist for the API to function
REQUIRED_SCHEMAS = [
    # Shape schemas
    "ShapePointResponse",
    "ShapeResponse",
    "LineStringGeometry",
    "FeatureResponse",
    "FeatureCollectionResponse",
    # Fare schemas
    "FareRuleResponse",
]

# Export all required schemas
__all__ = REQUIRED_SCHEMAS


def validate_schemas() -> bool:
    """Validate that all required schemas are available.

    Raises:
        ImportError: If any required schema is missing
    """
    import sys
    current_module = sys.modules[__name__]

    missing = []
    for schema_name in REQUIRED_SCHEMAS:
        if not hasattr(current_module, schema_name):
            missing.append(schema_name)

    if missing:
        error_msg = f"Missing required schemas: {', '.join(missing)}"
        logger.error(error_msg)
        raise ImportError(error_msg)

    logger.debug(f"Schema validation passed: {len(REQUIRED_SCHEMAS)} schemas loaded")
    return True


# Validate schemas at import time
validate_schemas()
