from .entities import Admin

__all__ = ["Admin"]
