from .auth_schemas import LOGIN_SCHEMA, REGISTER_SCHEMA, LoginRequest, RegisterRequest

__all__ = ["LOGIN_SCHEMA", "REGISTER_SCHEMA", "LoginRequest", "RegisterRequest"]
