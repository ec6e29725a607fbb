"""
Admin panel views - login and menu item management.

Every page under /adminPanel is reachable only with a valid session; the
gate lives in SessionGateMiddleware.
"""

import logging

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from menu_schemas import LoginRequest

from apps.web.admin_panel.forms import (
    FlagsForm,
    ImageUploadForm,
    LoginForm,
    MenuItemForm,
    MoveForm,
)
from apps.web.admin_panel.services import (
    FIELDS_REQUIRED_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    MoveDirection,
    login_error_message,
    move_item,
    next_position,
    sort_by_position,
    toggle_out_of_stock,
)
from apps.web.backend.client import MenuAPIClient
from apps.web.backend.exceptions import APIError
from apps.web.core.decorators import backend_action
from apps.web.core.session import (
    clear_session_cookie,
    is_safe_redirect,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

PANEL = "admin_panel:panel"


def _form_error(form) -> str:
    """First validation message of a bound form."""
    for errors in form.errors.values():
        return errors[0]
    return "Invalid input"


# =============================================================================
# Authentication
# =============================================================================


@require_http_methods(["GET", "POST"])
def login_view(request: HttpRequest) -> HttpResponse:
    """
    GET/POST /auth

    Login page. On success stores the session token and returns to
    ``?redirect=`` (or the admin panel).
    """
    form = LoginForm(request.POST or None)
    error = None

    if request.method == "POST":
        if not form.is_valid():
            error = FIELDS_REQUIRED_MESSAGE
        else:
            credentials = LoginRequest(**form.cleaned_data)
            try:
                with MenuAPIClient() as client:
                    result = client.login(credentials)
            except APIError as e:
                logger.info("Login failed for %s: %s", credentials.username, e.message)
                error = login_error_message(e)
            else:
                if result.token:
                    next_url = request.GET.get("redirect", "")
                    # Prevent open redirect
                    if not is_safe_redirect(next_url):
                        next_url = settings.LOGIN_REDIRECT_DEFAULT
                    response = redirect(next_url)
                    set_session_cookie(response, result.token)
                    logger.info("Admin %s logged in", credentials.username)
                    return response
                error = INVALID_CREDENTIALS_MESSAGE

    return render(request, "admin_panel/login.html", {"form": form, "error": error})


@require_POST
def logout_view(request: HttpRequest) -> HttpResponse:
    """
    POST /auth/logout

    Forget the session token and return to the login page.
    """
    response = redirect(settings.LOGIN_PATH)
    clear_session_cookie(response)
    return response


# =============================================================================
# Menu Items
# =============================================================================


@require_GET
def panel(request: HttpRequest) -> HttpResponse:
    """
    GET /adminPanel

    All menu items in menu order, named in the admin's locale.
    """
    error = None
    items = []

    try:
        with MenuAPIClient.for_request(request) as client:
            items = sort_by_position(client.get_all_menu_items())
    except APIError as e:
        logger.warning("Failed to load menu items: %s", e.message)
        error = e.message

    rows = [
        {
            "item": item,
            "name": item.name_for(request.locale),
            "description": item.description_for(request.locale),
            "is_first": index == 0,
            "is_last": index == len(items) - 1,
        }
        for index, item in enumerate(items)
    ]

    return render(request, "admin_panel/panel.html", {"rows": rows, "error": error})


@require_http_methods(["GET", "POST"])
def item_create(request: HttpRequest) -> HttpResponse:
    """
    GET/POST /adminPanel/items/new

    New items default to the end of the menu.
    """
    error = None

    with MenuAPIClient.for_request(request) as client:
        if request.method == "POST":
            form = MenuItemForm(request.POST)
            if form.is_valid():
                try:
                    item = client.create_menu_item(form.to_request())
                except APIError as e:
                    error = e.message
                else:
                    logger.info("Created menu item %s", item.id)
                    messages.success(request, f"Added {item.name_for(request.locale)}")
                    return redirect(PANEL)
        else:
            position = 1
            try:
                position = next_position(client.get_all_menu_items())
            except APIError as e:
                error = e.message
            form = MenuItemForm(initial={"position": position, "amount": 0, "time_to_cook": 0})

    return render(
        request,
        "admin_panel/item_form.html",
        {"form": form, "error": error, "item_id": None},
    )


@require_http_methods(["GET", "POST"])
def item_edit(request: HttpRequest, item_id: int) -> HttpResponse:
    """
    GET/POST /adminPanel/items/<item_id>/edit
    """
    error = None

    with MenuAPIClient.for_request(request) as client:
        if request.method == "POST":
            form = MenuItemForm(request.POST)
            if form.is_valid():
                try:
                    client.update_menu_item(item_id, form.to_request(item_id))
                except APIError as e:
                    error = e.message
                else:
                    logger.info("Updated menu item %s", item_id)
                    messages.success(request, "Menu item saved")
                    return redirect(PANEL)
        else:
            try:
                item = client.get_menu_item(item_id)
            except APIError as e:
                messages.error(request, e.message)
                return redirect(PANEL)
            form = MenuItemForm(initial=MenuItemForm.initial_for(item))

    return render(
        request,
        "admin_panel/item_form.html",
        {"form": form, "error": error, "item_id": item_id},
    )


@require_POST
@backend_action(PANEL)
def item_delete(request: HttpRequest, item_id: int, api: MenuAPIClient) -> HttpResponse:
    """
    POST /adminPanel/items/<item_id>/delete
    """
    api.delete_menu_item(item_id)
    logger.info("Deleted menu item %s", item_id)
    messages.success(request, "Menu item deleted")
    return redirect(PANEL)


@require_POST
@backend_action(PANEL)
def item_toggle_stock(request: HttpRequest, item_id: int, api: MenuAPIClient) -> HttpResponse:
    """
    POST /adminPanel/items/<item_id>/stock
    """
    toggle_out_of_stock(api, item_id)
    return redirect(PANEL)


@require_POST
@backend_action(PANEL)
def item_flags(request: HttpRequest, item_id: int, api: MenuAPIClient) -> HttpResponse:
    """
    POST /adminPanel/items/<item_id>/flags

    New/promo flags and promo price, sent as a partial update.
    """
    form = FlagsForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect(PANEL)

    api.update_menu_item_flags(item_id, form.to_flags())
    logger.info("Updated flags for menu item %s", item_id)
    return redirect(PANEL)


@require_POST
@backend_action(PANEL)
def item_image(request: HttpRequest, item_id: int, api: MenuAPIClient) -> HttpResponse:
    """
    POST /adminPanel/items/<item_id>/image
    """
    form = ImageUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect(PANEL)

    result = api.upload_menu_item_image(item_id, form.cleaned_data["image"])
    logger.info("Uploaded image for menu item %s: %s", item_id, result.image_url)
    messages.success(request, "Image uploaded")
    return redirect(PANEL)


@require_POST
@backend_action(PANEL)
def item_move(request: HttpRequest, item_id: int, api: MenuAPIClient) -> HttpResponse:
    """
    POST /adminPanel/items/<item_id>/move

    Swap with the neighbour above (``direction=up``) or below (``down``).
    """
    form = MoveForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect(PANEL)

    move_item(api, item_id, MoveDirection(form.cleaned_data["direction"]))
    return redirect(PANEL)
