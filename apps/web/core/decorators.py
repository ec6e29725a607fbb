"""
Decorators for request handling and validation.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect

from apps.web.backend.client import MenuAPIClient
from apps.web.backend.exceptions import APIError


def backend_action(redirect_to: str) -> Callable[..., Any]:
    """
    Decorator for views that change data through the menu backend.

    Opens a MenuAPIClient carrying the request's session token and passes it
    to the view as ``api``. A backend error becomes a flash message and the
    user is sent to ``redirect_to`` instead of seeing an error page.

    Usage:
        @backend_action("admin_panel:panel")
        def delete_item(request, item_id, api):
            ...
    """

    def decorator(view_func: Callable[..., HttpResponse]) -> Callable[..., HttpResponse]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
            try:
                with MenuAPIClient.for_request(request) as api:
                    return view_func(request, *args, api=api, **kwargs)
            except APIError as e:
                messages.error(request, e.message)
                return redirect(redirect_to)

        return wrapper

    return decorator
