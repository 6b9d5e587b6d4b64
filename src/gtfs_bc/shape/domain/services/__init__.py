from .shape_consolidator import consolidate_shapes, shapes_to_geojson, segment_key

__all__ = ["consolidate_shapes", "shapes_to_geojson", "segment_key"]
