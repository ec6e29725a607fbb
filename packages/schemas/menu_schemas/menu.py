"""Menu item schemas - data contracts for the admin and public menu APIs."""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# The backend expects JSON numbers, not the string form pydantic uses for Decimal
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]

# =============================================================================
# Enums
# =============================================================================


class Locale(str, Enum):
    """Supported display languages."""

    EN = "en"
    UK = "uk"


class MenuCategory(str, Enum):
    """Known menu categories, in display order."""

    FOOD = "food"
    DRINKS = "drinks"
    DESSERTS = "desserts"


class MenuUnit(str, Enum):
    """Units a portion amount is measured in."""

    GRAMS = "g"
    MILLILITRES = "ml"
    PIECES = "pcs"


# =============================================================================
# Base
# =============================================================================


class APIModel(BaseModel):
    """Base model speaking the backend's camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self, **kwargs) -> dict:
        """Serialize to a JSON-ready dict using wire (camelCase) names."""
        return self.model_dump(by_alias=True, mode="json", **kwargs)


# =============================================================================
# Admin Menu Items
# =============================================================================


class MenuItemFields(APIModel):
    """Fields shared by menu item reads and writes."""

    name_en: str
    name_uk: str
    description_en: str = ""
    description_uk: str = ""
    category: str
    unit: str
    amount: int = 0
    time_to_cook: int = Field(default=0, description="Minutes")
    price: Money
    promo_price: Money | None = None
    is_new: bool = False
    is_promo: bool = False
    is_out_of_stock: bool = False
    image_url: str | None = None
    position: int = 0

    def name_for(self, locale: Locale) -> str:
        """Name in the given display language."""
        return self.name_en if locale == Locale.EN else self.name_uk

    def description_for(self, locale: Locale) -> str:
        """Description in the given display language."""
        return self.description_en if locale == Locale.EN else self.description_uk

    @property
    def effective_price(self) -> Decimal:
        """Price a guest actually pays."""
        return self.promo_price if self.promo_price is not None else self.price


class MenuItem(MenuItemFields):
    """A menu item as stored by the backend."""

    id: int

    def to_request(self, **changes) -> "MenuItemRequest":
        """Build a full update request, optionally overriding fields."""
        data = self.model_dump()
        data.update(changes)
        return MenuItemRequest(**data)


class MenuItemRequest(MenuItemFields):
    """Create/update payload. ``id`` is omitted for new items."""

    id: int | None = None


class MenuItemFlags(APIModel):
    """
    Partial flag update for PATCH /flags.

    Only fields explicitly set are sent, so an unset promo price is left
    untouched while ``promo_price=None`` clears it.
    """

    is_new: bool | None = None
    is_promo: bool | None = None
    promo_price: Money | None = None
    is_out_of_stock: bool | None = None

    def to_payload(self, **kwargs) -> dict:
        return super().to_payload(exclude_unset=True, **kwargs)


class ImageUploadResult(APIModel):
    """Response from the image upload endpoint."""

    image_url: str


# =============================================================================
# Public Menu
# =============================================================================


class PublicMenuItem(APIModel):
    """A menu item already localized by the backend for one language."""

    name: str
    description: str = ""
    category: str
    unit: str
    amount: int = 0
    time_to_cook: int = 0
    price: Money
    promo_price: Money | None = None
    is_new: bool = False
    is_promo: bool = False
    is_out_of_stock: bool = False
    image_url: str | None = None
    position: int = 0

    @property
    def effective_price(self) -> Decimal:
        """Price a guest actually pays."""
        return self.promo_price if self.promo_price is not None else self.price
