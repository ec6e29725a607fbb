"""Admin authentication schemas."""

from pydantic import StrictBool

from menu_schemas.menu import APIModel


class LoginRequest(APIModel):
    """Admin credentials."""

    username: str
    password: str


class LoginResponse(APIModel):
    """Issued session token. Empty when the backend declined to issue one."""

    token: str = ""


class AuthCheckResponse(APIModel):
    """
    Result of validating a session token.

    Only a literal JSON ``true`` counts as authenticated.
    """

    is_authenticated: StrictBool
