from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.shared.validation import Rule, Schema, is_email, max_length, min_length, not_blank, not_empty

LOGIN_SCHEMA = Schema([
    Rule("username", not_blank, "Username is required"),
    Rule("password", not_empty, "Password is required"),
])

REGISTER_SCHEMA = Schema([
    Rule("username", min_length(3, strip=True), "Username must be at least 3 characters"),
    Rule("username", max_length(50, strip=True), "Username must be at most 50 characters"),
    Rule("password", min_length(6), "Password must be at least 6 characters"),
    Rule("email", is_email, "Invalid email address"),
    Rule("email", max_length(100, strip=True), "Email must be at most 100 characters"),
])


@dataclass(frozen=True)
class LoginRequest:
    username: str
    password: str

    @classmethod
    def parse(cls, payload: Optional[Mapping[str, Any]]) -> "LoginRequest":
        LOGIN_SCHEMA.enforce(payload)
        return cls(username=payload["username"].strip(), password=payload["password"])


@dataclass(frozen=True)
class RegisterRequest:
    username: str
    password: str
    email: str

    @classmethod
    def parse(cls, payload: Optional[Mapping[str, Any]]) -> "RegisterRequest":
        REGISTER_SCHEMA.enforce(payload)
        return cls(
            username=payload["username"].strip(),
            password=payload["password"],
            email=payload["email"].strip(),
        )
