from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt  # PyJWT

from src.config import Settings
from src.shared.exceptions import AuthenticationError

INVALID_TOKEN = "Invalid or expired token"


@dataclass(frozen=True)
class TokenSettings:
    secret: str
    algorithm: str = "HS256"
    access_days: int = 7

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenSettings":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            access_days=settings.ACCESS_TOKEN_EXPIRE_DAYS,
        )


@dataclass(frozen=True)
class AdminIdentity:
    admin_id: int
    username: str


class TokenService:
    """Issues and verifies stateless HS256 access tokens for admins."""

    def __init__(
        self,
        settings: TokenSettings,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._s = settings
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _encode(self, payload: Dict[str, Any]) -> str:
        return jwt.encode(payload, self._s.secret, algorithm=self._s.algorithm)

    def issue(self, admin_id: int, username: str, expires: Optional[timedelta] = None) -> str:
        now = self._clock()
        exp = now + (expires or timedelta(days=self._s.access_days))
        payload = {
            "sub": str(admin_id),
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
            "typ": "access",
        }
        return self._encode(payload)

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._s.secret,
                algorithms=[self._s.algorithm],
                options={"verify_exp": True, "require": ["sub", "exp"]},
            )
        except jwt.InvalidTokenError as e:
            # ExpiredSignatureError is a subclass
            raise AuthenticationError(INVALID_TOKEN) from e

    def verify(self, token: str) -> AdminIdentity:
        claims = self.decode(token)
        if claims.get("typ") != "access":
            raise AuthenticationError(INVALID_TOKEN)
        try:
            admin_id = int(claims["sub"])
        except (TypeError, ValueError) as e:
            raise AuthenticationError(INVALID_TOKEN) from e
        username = claims.get("username")
        if not isinstance(username, str):
            raise AuthenticationError(INVALID_TOKEN)
        return AdminIdentity(admin_id=admin_id, username=username)
