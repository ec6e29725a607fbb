"""
Public menu views - what guests see, in their language.
"""

import logging
from collections.abc import Iterable

from django.http import HttpRequest, HttpResponse, HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from menu_schemas import MenuCategory, PublicMenuItem

from apps.web.backend.client import MenuAPIClient
from apps.web.backend.exceptions import APIError
from apps.web.core.locale import set_locale_cookie, to_locale
from apps.web.core.session import is_safe_redirect

logger = logging.getLogger(__name__)

CATEGORY_ORDER = [category.value for category in MenuCategory]


def group_by_category(
    items: Iterable[PublicMenuItem],
) -> list[tuple[str, list[PublicMenuItem]]]:
    """
    Group items into menu sections.

    Known categories come first in their fixed order, unknown ones after
    them alphabetically. Items inside a section follow their position.
    """
    sections: dict[str, list[PublicMenuItem]] = {}
    for item in items:
        sections.setdefault(item.category, []).append(item)

    def section_key(category: str) -> tuple[int, str]:
        if category in CATEGORY_ORDER:
            return (CATEGORY_ORDER.index(category), "")
        return (len(CATEGORY_ORDER), category)

    return [
        (category, sorted(sections[category], key=lambda item: item.position))
        for category in sorted(sections, key=section_key)
    ]


@require_GET
def menu_page(request: HttpRequest) -> HttpResponse:
    """
    GET /

    Public menu in the request's locale. Backend failures are shown inline.
    """
    error = None
    sections: list[tuple[str, list[PublicMenuItem]]] = []

    try:
        with MenuAPIClient() as client:
            items = client.get_public_menu_items(lang=request.locale)
    except APIError as e:
        logger.warning("Failed to load public menu: %s", e.message)
        error = e.message
    else:
        sections = group_by_category(items)

    return render(
        request,
        "menu/menu.html",
        {
            "sections": sections,
            "error": error,
        },
    )


@require_POST
def set_locale(request: HttpRequest) -> HttpResponse:
    """
    POST /locale

    Switch the display language. Redirects so the next page renders in it.
    """
    locale = to_locale(request.POST.get("locale"))
    if locale is None:
        return HttpResponseBadRequest("Unsupported locale")

    next_url = request.POST.get("next", "/")
    # Prevent open redirect
    if not is_safe_redirect(next_url):
        next_url = "/"

    response = redirect(next_url)
    set_locale_cookie(response, locale)
    return response
