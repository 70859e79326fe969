"""
Admin Entity
The only principal of the back-office; authenticates with username + password.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class Admin:
    id: int
    username: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    def to_public(self) -> Dict[str, Any]:
        # password_hash never leaves the service
        return {"id": self.id, "username": self.username, "email": self.email}
