from .route import Route

__all__ = ["Route"]
