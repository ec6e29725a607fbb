"""Template context shared by every page."""

from django.http import HttpRequest

from .locale import DEFAULT_LOCALE, LOCALE_LABELS


def locale(request: HttpRequest) -> dict:
    """Current locale and the choices for the language switcher."""
    current = getattr(request, "locale", DEFAULT_LOCALE)
    return {
        "current_locale": current.value,
        "locale_choices": [(code.value, label) for code, label in LOCALE_LABELS.items()],
    }
