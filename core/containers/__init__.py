from .gtfs_container import GTFSContainer

__all__ = ["GTFSContainer"]
