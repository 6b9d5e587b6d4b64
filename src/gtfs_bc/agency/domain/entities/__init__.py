from .agency import Agency

__all__ = ["Agency"]
