"""
Admin session cookie helpers.

The backend issues an opaque bearer token on login; it lives in the
``auth-token`` cookie and is re-read from the request on every call.
"""

from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpRequest, HttpResponse

SESSION_COOKIE_NAME = "auth-token"
SESSION_MAX_AGE = 86400  # 24 hours


def get_session_token(request: HttpRequest) -> str | None:
    """Session token from the request cookie, or None if missing/empty."""
    return request.COOKIES.get(SESSION_COOKIE_NAME) or None


def set_session_cookie(response: HttpResponse, token: str) -> None:
    """Store a freshly issued token."""
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=SESSION_MAX_AGE,
        path="/",
        samesite="Lax",
        httponly=True,
    )


def clear_session_cookie(response: HttpResponse) -> None:
    """Expire the token cookie (empty value, expiry in the past)."""
    response.delete_cookie(SESSION_COOKIE_NAME, path="/", samesite="Lax")


def is_safe_redirect(target: str | None) -> bool:
    """Only local absolute paths are allowed as post-login targets."""
    return bool(target) and target.startswith("/") and not target.startswith("//")


def login_url(next_path: str) -> str:
    """Login route carrying the page to return to afterwards."""
    return f"{settings.LOGIN_PATH}?{urlencode({'redirect': next_path})}"


def is_login_path(path: str) -> bool:
    return path == settings.LOGIN_PATH


def is_protected_path(path: str) -> bool:
    """True for any protected prefix and everything beneath it."""
    for prefix in settings.PROTECTED_PATH_PREFIXES:
        if path == prefix or path.startswith(f"{prefix}/"):
            return True
    return False
