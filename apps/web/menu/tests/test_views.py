"""
Integration tests for public menu views.
"""

from decimal import Decimal

import httpx
import pytest

from apps.web.backend.tests.factories import PublicMenuItemFactory
from apps.web.core.locale import COOKIE_NAME
from apps.web.menu.views import group_by_category

PUBLIC_MENU = "/api/MenuItems"


class TestGroupByCategory:
    def test_known_categories_first_then_alphabetical(self):
        items = [
            PublicMenuItemFactory.build(category="specials"),
            PublicMenuItemFactory.build(category="desserts"),
            PublicMenuItemFactory.build(category="food"),
            PublicMenuItemFactory.build(category="brunch"),
            PublicMenuItemFactory.build(category="drinks"),
        ]

        sections = group_by_category(items)

        assert [category for category, _ in sections] == [
            "food",
            "drinks",
            "desserts",
            "brunch",
            "specials",
        ]

    def test_items_follow_position(self):
        items = [
            PublicMenuItemFactory.build(name="Third", position=3),
            PublicMenuItemFactory.build(name="First", position=1),
            PublicMenuItemFactory.build(name="Second", position=2),
        ]

        ((_, section),) = group_by_category(items)

        assert [item.name for item in section] == ["First", "Second", "Third"]

    def test_empty(self):
        assert group_by_category([]) == []


class TestMenuPage:
    """Tests for GET /."""

    def test_renders_menu_in_cookie_locale(self, http_client, backend):
        items = [
            PublicMenuItemFactory.build(name="Pancakes", category="food"),
            PublicMenuItemFactory.build(
                name="Lemonade",
                category="drinks",
                price=Decimal("60.00"),
                promo_price=Decimal("45.00"),
            ),
        ]
        route = backend.get(PUBLIC_MENU).respond(
            json=[item.to_payload() for item in items]
        )
        http_client.cookies[COOKIE_NAME] = "en"

        response = http_client.get("/")

        assert response.status_code == 200
        assert route.calls.last.request.url.params["lang"] == "en"
        content = response.content.decode()
        assert "Pancakes" in content
        assert "Lemonade" in content
        assert content.index("Pancakes") < content.index("Lemonade")
        assert COOKIE_NAME not in response.cookies

    def test_first_visit_detects_and_persists_locale(self, http_client, backend):
        route = backend.get(PUBLIC_MENU).respond(json=[])

        response = http_client.get("/", HTTP_ACCEPT_LANGUAGE="uk-UA,en;q=0.5")

        assert response.status_code == 200
        assert route.calls.last.request.url.params["lang"] == "uk"
        assert response.cookies[COOKIE_NAME].value == "uk"

    def test_first_visit_without_header_uses_default(self, http_client, backend):
        route = backend.get(PUBLIC_MENU).respond(json=[])

        response = http_client.get("/")

        assert route.calls.last.request.url.params["lang"] == "uk"
        assert response.cookies[COOKIE_NAME].value == "uk"

    def test_backend_error_is_shown_inline(self, http_client, backend):
        backend.get(PUBLIC_MENU).respond(status_code=500, json={"message": "db down"})

        response = http_client.get("/")

        assert response.status_code == 200
        assert b"db down" in response.content

    def test_network_error_is_shown_inline(self, http_client, backend):
        backend.get(PUBLIC_MENU).mock(side_effect=httpx.ConnectError)

        response = http_client.get("/")

        assert response.status_code == 200
        assert b"Network error" in response.content

    def test_public_menu_ignores_session(self, http_client, backend):
        route = backend.get(PUBLIC_MENU).respond(json=[])
        http_client.cookies["auth-token"] = "valid-token"

        http_client.get("/")

        assert "Authorization" not in route.calls.last.request.headers


class TestSetLocale:
    """Tests for POST /locale."""

    def test_switch_sets_cookie_and_redirects(self, http_client):
        http_client.cookies[COOKIE_NAME] = "uk"

        response = http_client.post("/locale", {"locale": "en", "next": "/adminPanel"})

        assert response.status_code == 302
        assert response.url == "/adminPanel"
        cookie = response.cookies[COOKIE_NAME]
        assert cookie.value == "en"
        assert cookie["samesite"] == "Lax"

    def test_defaults_to_home(self, http_client):
        response = http_client.post("/locale", {"locale": "uk"})

        assert response.url == "/"
        assert response.cookies[COOKIE_NAME].value == "uk"

    @pytest.mark.parametrize("next_url", ["//evil.example.com", "https://evil.example.com"])
    def test_rejects_external_next(self, http_client, next_url):
        response = http_client.post("/locale", {"locale": "en", "next": next_url})

        assert response.url == "/"

    def test_unsupported_locale(self, http_client):
        http_client.cookies[COOKIE_NAME] = "uk"

        response = http_client.post("/locale", {"locale": "fr"})

        assert response.status_code == 400
        assert COOKIE_NAME not in response.cookies

    def test_get_not_allowed(self, http_client):
        response = http_client.get("/locale")

        assert response.status_code == 405
