"""Menu Schemas - Pydantic models for the menu backend's data contracts."""

from menu_schemas.auth import AuthCheckResponse, LoginRequest, LoginResponse
from menu_schemas.menu import (
    APIModel,
    ImageUploadResult,
    Locale,
    MenuCategory,
    MenuItem,
    MenuItemFields,
    MenuItemFlags,
    MenuItemRequest,
    MenuUnit,
    PublicMenuItem,
)

__all__ = [
    # Auth
    "AuthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    # Menu
    "APIModel",
    "ImageUploadResult",
    "Locale",
    "MenuCategory",
    "MenuItem",
    "MenuItemFields",
    "MenuItemFlags",
    "MenuItemRequest",
    "MenuUnit",
    "PublicMenuItem",
]
