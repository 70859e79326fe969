from .admin_model import AdminModel

__all__ = ["AdminModel"]
