from .shape_router import router as shape_router
from .fare_router import router as fare_router

__all__ = ["shape_router", "fare_router"]
