from .passwords import PasswordHasher
from .tokens import AdminIdentity, TokenService, TokenSettings

__all__ = ["PasswordHasher", "AdminIdentity", "TokenService", "TokenSettings"]
