from .shape_repository import ShapeRepository

__all__ = ["ShapeRepository"]
