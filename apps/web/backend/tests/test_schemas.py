"""Tests for the menu backend data contracts."""

from decimal import Decimal

import pytest
from menu_schemas import AuthCheckResponse, Locale, MenuItem, MenuItemFlags
from pydantic import ValidationError

from apps.web.backend.tests.factories import MenuItemFactory


class TestMenuItem:
    def test_parses_camel_case_payload(self):
        item = MenuItem.model_validate(
            {
                "id": 4,
                "nameEn": "Latte",
                "nameUk": "Лате",
                "descriptionEn": "Milk coffee",
                "descriptionUk": "Кава з молоком",
                "category": "drinks",
                "unit": "ml",
                "amount": 300,
                "timeToCook": 5,
                "price": 65.5,
                "promoPrice": 55,
                "isNew": True,
                "isPromo": True,
                "isOutOfStock": False,
                "imageUrl": "/img/latte.png",
                "position": 2,
            }
        )

        assert item.time_to_cook == 5
        assert item.promo_price == Decimal("55")
        assert item.image_url == "/img/latte.png"

    def test_localized_fields(self):
        item = MenuItemFactory.build(name_en="Soup", name_uk="Суп")

        assert item.name_for(Locale.EN) == "Soup"
        assert item.name_for(Locale.UK) == "Суп"
        assert item.description_for(Locale.UK) == item.description_uk

    def test_effective_price_prefers_promo(self):
        regular = MenuItemFactory.build(price=Decimal("100"))
        promo = MenuItemFactory.build(price=Decimal("100"), promo_price=Decimal("80"))

        assert regular.effective_price == Decimal("100")
        assert promo.effective_price == Decimal("80")

    def test_payload_uses_numbers_for_money(self):
        payload = MenuItemFactory.build(price=Decimal("12.50")).to_payload()

        assert payload["price"] == 12.5
        assert "nameEn" in payload

    def test_to_request_applies_changes(self):
        item = MenuItemFactory.build(id=8, position=1)

        request = item.to_request(position=5)

        assert request.id == 8
        assert request.position == 5
        assert request.name_en == item.name_en


class TestMenuItemFlags:
    def test_only_set_fields_are_sent(self):
        assert MenuItemFlags(is_new=True).to_payload() == {"isNew": True}

    def test_explicit_none_clears_promo_price(self):
        payload = MenuItemFlags(is_promo=False, promo_price=None).to_payload()

        assert payload == {"isPromo": False, "promoPrice": None}


class TestAuthCheckResponse:
    def test_true(self):
        assert AuthCheckResponse.model_validate({"isAuthenticated": True}).is_authenticated

    @pytest.mark.parametrize("value", ["true", 1, None])
    def test_non_boolean_rejected(self, value):
        with pytest.raises(ValidationError):
            AuthCheckResponse.model_validate({"isAuthenticated": value})
