"""
Locale resolution - picks the display language for a request.

Resolution order:
1. NEXT_LOCALE cookie (if it names a supported locale)
2. Accept-Language header
3. DEFAULT_LOCALE

A detected locale is written back to the cookie so later requests stop at
step 1.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from django.http import HttpRequest, HttpResponse

from menu_schemas import Locale

logger = logging.getLogger(__name__)

LOCALES: tuple[Locale, ...] = (Locale.EN, Locale.UK)
DEFAULT_LOCALE = Locale.UK
COOKIE_NAME = "NEXT_LOCALE"
COOKIE_MAX_AGE = 31536000  # 1 year

LOCALE_LABELS: dict[Locale, str] = {
    Locale.EN: "English",
    Locale.UK: "Українська",
}

# Language tag prefixes that select each locale, checked in this order
LOCALE_PREFIXES: dict[Locale, tuple[str, ...]] = {
    Locale.UK: ("uk", "ua"),
    Locale.EN: ("en",),
}


@dataclass(frozen=True)
class LocaleResolution:
    """Outcome of resolving a request's locale."""

    locale: Locale
    from_cookie: bool

    @property
    def needs_persisting(self) -> bool:
        """True when the cookie should be written on the response."""
        return not self.from_cookie


def to_locale(value: str | None) -> Locale | None:
    """Return the supported locale named by ``value``, or None."""
    if not value:
        return None
    try:
        locale = Locale(value)
    except ValueError:
        return None
    return locale if locale in LOCALES else None


def parse_accept_language(header: str | None) -> list[str]:
    """
    Split an Accept-Language header into lower-cased tags, most preferred first.

    Entries are ordered by q-value (ties keep header order). ``q=0`` entries
    are dropped, a malformed q-value counts as 1.
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.partition(";")
        tag = tag.strip().lower()
        if not tag:
            continue

        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0

        if quality > 0:
            weighted.append((-quality, index, tag))

    return [tag for _, _, tag in sorted(weighted)]


def detect_locale(tags: Iterable[str]) -> Locale:
    """
    Pick a locale from language tags in preference order.

    The first tag that starts with a known prefix wins; with no match the
    default locale is used.
    """
    for tag in tags:
        normalized = tag.strip().lower()
        for locale, prefixes in LOCALE_PREFIXES.items():
            if normalized.startswith(prefixes):
                return locale
    return DEFAULT_LOCALE


def read_locale_cookie(request: HttpRequest) -> Locale | None:
    """Locale stored in the request cookie, or None if absent or unsupported."""
    return to_locale(request.COOKIES.get(COOKIE_NAME))


def resolve_locale(request: HttpRequest) -> LocaleResolution:
    """Resolve the locale for a request without touching the response."""
    cookie_locale = read_locale_cookie(request)
    if cookie_locale is not None:
        return LocaleResolution(locale=cookie_locale, from_cookie=True)

    tags = parse_accept_language(request.headers.get("Accept-Language"))
    locale = detect_locale(tags)
    logger.debug("Detected locale %s from Accept-Language %r", locale.value, tags)
    return LocaleResolution(locale=locale, from_cookie=False)


def set_locale_cookie(response: HttpResponse, locale: Locale) -> None:
    """Persist ``locale`` on the response. Readable by client scripts."""
    response.set_cookie(
        COOKIE_NAME,
        locale.value,
        max_age=COOKIE_MAX_AGE,
        path="/",
        samesite="Lax",
        httponly=False,
    )
