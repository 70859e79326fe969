from __future__ import annotations

import structlog
from passlib.context import CryptContext

logger = structlog.get_logger(__name__)

_SUPPORTED = ("argon2", "bcrypt")


class PasswordHasher:
    """
    Salted one-way password hashing through passlib.

    New hashes use ``scheme`` (argon2id by default); hashes produced by the
    other supported scheme still verify, so switching schemes never locks
    existing admins out.
    """

    def __init__(self, scheme: str = "argon2") -> None:
        scheme = scheme.lower()
        if scheme not in _SUPPORTED:
            raise ValueError(f"Unsupported password hash scheme: {scheme}")
        schemes = [scheme] + [s for s in _SUPPORTED if s != scheme]
        self._ctx = CryptContext(
            schemes=schemes,
            default=scheme,
            deprecated="auto",
            argon2__type="ID",
            argon2__memory_cost=65536,
            argon2__time_cost=3,
            argon2__parallelism=4,
        )
        self.scheme = scheme

    def hash(self, plain: str) -> str:
        if not plain:
            raise ValueError("Password cannot be empty")
        return self._ctx.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        if not plain or not hashed:
            return False
        try:
            return self._ctx.verify(plain, hashed)
        except ValueError as e:
            # Unrecognised or corrupt stored hash
            logger.error("Password verification error", error=str(e))
            return False
