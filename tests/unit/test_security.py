from datetime import timedelta

import jwt
import pytest

from src.shared.exceptions import AuthenticationError
from src.shared.security import PasswordHasher, TokenService, TokenSettings

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


def test_password_hash_roundtrip():
    hasher = PasswordHasher("argon2")
    h = hasher.hash("P@ssw0rd!!")
    assert h.startswith("$argon2id$")
    assert "P@ssw0rd!!" not in h
    assert hasher.verify("P@ssw0rd!!", h)
    assert not hasher.verify("wrong", h)


def test_password_hashes_are_salted():
    hasher = PasswordHasher()
    assert hasher.hash("same-password") != hasher.hash("same-password")


def test_verify_rejects_garbage_hash():
    assert not PasswordHasher().verify("whatever", "not-a-hash")


def test_unknown_scheme_rejected():
    with pytest.raises(ValueError):
        PasswordHasher("md5")


def test_jwt_cycle():
    tokens = TokenService(TokenSettings(secret=SECRET))
    token = tokens.issue(42, "admin")
    identity = tokens.verify(token)
    assert identity.admin_id == 42
    assert identity.username == "admin"

    claims = tokens.decode(token)
    assert claims["sub"] == "42"
    assert claims["typ"] == "access"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_expired_token_rejected():
    tokens = TokenService(TokenSettings(secret=SECRET))
    token = tokens.issue(1, "admin", expires=timedelta(seconds=-5))
    with pytest.raises(AuthenticationError) as exc:
        tokens.verify(token)
    assert exc.value.message == "Invalid or expired token"


def test_token_signed_with_other_secret_rejected():
    other = TokenService(TokenSettings(secret="another-secret-that-is-also-long-enough"))
    with pytest.raises(AuthenticationError):
        TokenService(TokenSettings(secret=SECRET)).verify(other.issue(1, "admin"))


def test_token_without_username_rejected():
    token = jwt.encode({"sub": "1", "exp": 4102444800, "typ": "access"}, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        TokenService(TokenSettings(secret=SECRET)).verify(token)
