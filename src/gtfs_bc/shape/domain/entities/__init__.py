from .shape import Shape, ShapePoint

__all__ = ["Shape", "ShapePoint"]
