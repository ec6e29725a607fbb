"""Tests for admin panel services."""

from unittest.mock import MagicMock

import pytest

from apps.web.admin_panel.services import (
    FIELDS_REQUIRED_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    SERVER_ERROR_MESSAGE,
    MoveDirection,
    login_error_message,
    move_item,
    next_position,
    sort_by_position,
    toggle_out_of_stock,
)
from apps.web.backend.client import MenuAPIClient
from apps.web.backend.exceptions import APIError, APINetworkError
from apps.web.backend.tests.factories import MenuItemFactory


@pytest.fixture
def api() -> MagicMock:
    return MagicMock(spec=MenuAPIClient)


def updated_positions(api: MagicMock) -> dict[int, int]:
    return {call.args[0]: call.args[1].position for call in api.update_menu_item.call_args_list}


class TestOrdering:
    def test_sort_by_position_breaks_ties_by_id(self):
        items = [
            MenuItemFactory.build(id=3, position=1),
            MenuItemFactory.build(id=1, position=2),
            MenuItemFactory.build(id=2, position=1),
        ]

        assert [item.id for item in sort_by_position(items)] == [2, 3, 1]

    def test_next_position(self):
        items = [MenuItemFactory.build(position=p) for p in (3, 7, 1)]

        assert next_position(items) == 8

    def test_next_position_for_empty_menu(self):
        assert next_position([]) == 1


class TestMoveItem:
    @pytest.fixture
    def items(self):
        return [
            MenuItemFactory.build(id=10, position=1),
            MenuItemFactory.build(id=20, position=2),
            MenuItemFactory.build(id=30, position=3),
        ]

    def test_move_up_swaps_with_previous(self, api, items):
        api.get_all_menu_items.return_value = items

        assert move_item(api, 20, MoveDirection.UP) is True

        assert updated_positions(api) == {20: 1, 10: 2}

    def test_move_down_swaps_with_next(self, api, items):
        api.get_all_menu_items.return_value = items

        assert move_item(api, 20, MoveDirection.DOWN) is True

        assert updated_positions(api) == {20: 3, 30: 2}

    @pytest.mark.parametrize(
        "item_id, direction",
        [(10, MoveDirection.UP), (30, MoveDirection.DOWN)],
    )
    def test_ends_do_not_move(self, api, items, item_id, direction):
        api.get_all_menu_items.return_value = items

        assert move_item(api, item_id, direction) is False

        api.update_menu_item.assert_not_called()

    def test_unknown_item(self, api, items):
        api.get_all_menu_items.return_value = items

        with pytest.raises(APIError) as exc_info:
            move_item(api, 99, MoveDirection.UP)

        assert exc_info.value.status_code == 404
        api.update_menu_item.assert_not_called()

    def test_duplicate_positions_use_list_order(self, api):
        api.get_all_menu_items.return_value = [
            MenuItemFactory.build(id=1, position=5),
            MenuItemFactory.build(id=2, position=5),
        ]

        move_item(api, 2, MoveDirection.UP)

        assert updated_positions(api) == {2: 1, 1: 2}

    def test_full_item_is_sent(self, api, items):
        api.get_all_menu_items.return_value = items

        move_item(api, 20, MoveDirection.UP)

        first_call = api.update_menu_item.call_args_list[0]
        request = first_call.args[1]
        assert request.id == 20
        assert request.name_en == items[1].name_en
        assert request.price == items[1].price


class TestToggleOutOfStock:
    @pytest.mark.parametrize("current", [True, False])
    def test_flips_flag(self, api, current):
        api.get_menu_item.return_value = MenuItemFactory.build(id=4, is_out_of_stock=current)

        updated = toggle_out_of_stock(api, 4)

        assert updated.is_out_of_stock is not current
        item_id, request = api.update_menu_item.call_args.args
        assert item_id == 4
        assert request.is_out_of_stock is not current

    def test_missing_item_propagates(self, api):
        api.get_menu_item.side_effect = APIError("Not found", status_code=404)

        with pytest.raises(APIError):
            toggle_out_of_stock(api, 4)

        api.update_menu_item.assert_not_called()


class TestLoginErrorMessage:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (APIError("HTTP error! status: 400", status_code=400), FIELDS_REQUIRED_MESSAGE),
            (APIError("Username is required", status_code=400), "Username is required"),
            (APIError("HTTP error! status: 401", status_code=401), INVALID_CREDENTIALS_MESSAGE),
            (APIError("Account locked", status_code=401), "Account locked"),
            (APIError("NullReferenceException", status_code=500), SERVER_ERROR_MESSAGE),
            (APIError("HTTP error! status: 503", status_code=503), SERVER_ERROR_MESSAGE),
            (APIError("Too many attempts", status_code=429), "Too many attempts"),
        ],
    )
    def test_mapping(self, error, expected):
        assert login_error_message(error) == expected

    def test_network_error_keeps_its_message(self):
        error = APINetworkError(MenuAPIClient.NETWORK_ERROR_MESSAGE)

        assert login_error_message(error) == MenuAPIClient.NETWORK_ERROR_MESSAGE
