"""
Request middleware - locale resolution and admin route gating.
"""

import logging
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.utils import translation

from apps.web.backend.client import MenuAPIClient

from .locale import COOKIE_NAME, resolve_locale, set_locale_cookie
from .session import (
    SESSION_COOKIE_NAME,
    clear_session_cookie,
    get_session_token,
    is_login_path,
    is_protected_path,
    is_safe_redirect,
    login_url,
)

logger = logging.getLogger(__name__)


class LocaleMiddleware:
    """
    Middleware that attaches the display locale to the request.

    Locale is determined by (in order):
    1. NEXT_LOCALE cookie
    2. Accept-Language header
    3. Default locale

    Sets request.locale and activates Django translations for it. A locale
    that did not come from the cookie is persisted on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        resolution = resolve_locale(request)
        request.locale = resolution.locale  # type: ignore[attr-defined]

        with translation.override(resolution.locale.value):
            request.LANGUAGE_CODE = resolution.locale.value  # type: ignore[attr-defined]
            response = self.get_response(request)

        response.headers.setdefault("Content-Language", resolution.locale.value)
        # An explicit switch on this request wins over detection
        if resolution.needs_persisting and COOKIE_NAME not in response.cookies:
            set_locale_cookie(response, resolution.locale)
        return response


class SessionGateMiddleware:
    """
    Middleware that keeps protected pages behind a valid admin session.

    - No token on a protected page: redirect to login, remembering the page.
    - Token on a protected page or the login page: validated remotely.
      - Invalid: cookie cleared; protected pages redirect to login, the login
        page renders.
      - Valid on the login page: redirect to ``?redirect=`` or the site root.
    - Everything else passes through untouched.

    Sets request.session_token and request.session_valid.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        token = get_session_token(request)
        is_login = is_login_path(request.path)
        is_protected = is_protected_path(request.path)

        request.session_token = token  # type: ignore[attr-defined]
        request.session_valid = False  # type: ignore[attr-defined]

        if token is None:
            if is_protected:
                return HttpResponseRedirect(login_url(request.path))
            return self.get_response(request)

        if not (is_login or is_protected):
            return self.get_response(request)

        if self._validate(token):
            request.session_valid = True  # type: ignore[attr-defined]
            if is_login:
                target = request.GET.get("redirect")
                return HttpResponseRedirect(target if is_safe_redirect(target) else "/")
            return self.get_response(request)

        # Invalid token: the cookie goes on whichever response is returned
        request.session_token = None  # type: ignore[attr-defined]
        if is_protected:
            response = HttpResponseRedirect(login_url(request.path))
            clear_session_cookie(response)
            return response

        response = self.get_response(request)
        # A successful login on this request has already set a fresh token
        if SESSION_COOKIE_NAME not in response.cookies:
            clear_session_cookie(response)
        return response

    def _validate(self, token: str) -> bool:
        """Check the token with the backend. Fails closed."""
        with MenuAPIClient(token=token) as client:
            valid = client.check_auth()

        if not valid:
            logger.info("Invalid admin session token, clearing cookie")
        return valid
