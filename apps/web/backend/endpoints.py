"""Backend API paths."""

AUTH_LOGIN = "/api/admin/Auth/login"
AUTH_CHECK = "/api/admin/Auth/checkAuth"

MENU_ITEMS = "/api/admin/MenuItems"
PUBLIC_MENU_ITEMS = "/api/MenuItems"


def menu_item(item_id: int) -> str:
    return f"{MENU_ITEMS}/{item_id}"


def menu_item_flags(item_id: int) -> str:
    return f"{MENU_ITEMS}/{item_id}/flags"


def menu_item_image(item_id: int) -> str:
    return f"{MENU_ITEMS}/{item_id}/image"
