"""
Admin panel services - menu operations built from several backend calls.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from menu_schemas import MenuItem

from apps.web.backend.client import MenuAPIClient
from apps.web.backend.exceptions import APIError

logger = logging.getLogger(__name__)

FIELDS_REQUIRED_MESSAGE = "Username and password are required"
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
SERVER_ERROR_MESSAGE = "Server error. Please try again later."


class MoveDirection(str, Enum):
    """Direction to shift an item in the menu order."""

    UP = "up"
    DOWN = "down"


def sort_by_position(items: Iterable[MenuItem]) -> list[MenuItem]:
    """Menu order: by position, ties broken by id."""
    return sorted(items, key=lambda item: (item.position, item.id))


def next_position(items: Iterable[MenuItem]) -> int:
    """Position for a new item so it lands at the end of the menu."""
    return max((item.position for item in items), default=0) + 1


def move_item(client: MenuAPIClient, item_id: int, direction: MoveDirection) -> bool:
    """
    Swap an item with its neighbour in menu order.

    Args:
        client: Authenticated backend client.
        item_id: Item to move.
        direction: Towards the top (UP) or the bottom (DOWN) of the menu.

    Returns:
        True if positions changed, False if the item is already at that end.

    Raises:
        APIError: If the item does not exist or a backend call fails.
    """
    items = sort_by_position(client.get_all_menu_items())

    index = next((i for i, item in enumerate(items) if item.id == item_id), None)
    if index is None:
        raise APIError("Menu item not found", status_code=404)

    other_index = index - 1 if direction == MoveDirection.UP else index + 1
    if not 0 <= other_index < len(items):
        return False

    item, other = items[index], items[other_index]
    new_position, other_new_position = other.position, item.position
    if new_position == other_new_position:
        # Duplicate positions can't be swapped; fall back to list order
        new_position, other_new_position = other_index + 1, index + 1

    client.update_menu_item(item.id, item.to_request(position=new_position))
    client.update_menu_item(other.id, other.to_request(position=other_new_position))

    logger.info(
        "Moved menu item %s %s (position %s -> %s)",
        item.id,
        direction.value,
        item.position,
        new_position,
    )
    return True


def toggle_out_of_stock(client: MenuAPIClient, item_id: int) -> MenuItem:
    """Flip an item's out-of-stock flag with a full update. Returns the new state."""
    item = client.get_menu_item(item_id)
    updated = item.model_copy(update={"is_out_of_stock": not item.is_out_of_stock})
    client.update_menu_item(item_id, updated.to_request())

    logger.info("Menu item %s out_of_stock=%s", item_id, updated.is_out_of_stock)
    return updated


def _backend_message(error: APIError) -> str | None:
    """The backend's own explanation, if it gave one."""
    if error.message == f"HTTP error! status: {error.status_code}":
        return None
    return error.message or None


def login_error_message(error: APIError) -> str:
    """User-facing text for a failed login."""
    if error.status_code == 400:
        return _backend_message(error) or FIELDS_REQUIRED_MESSAGE
    if error.status_code == 401:
        return _backend_message(error) or INVALID_CREDENTIALS_MESSAGE
    if error.status_code is not None and error.status_code >= 500:
        return SERVER_ERROR_MESSAGE
    return error.message or "Something went wrong. Please try again."
