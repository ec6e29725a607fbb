"""Django app configuration for the menu backend client."""

from django.apps import AppConfig


class BackendConfig(AppConfig):
    """Backend client app configuration."""

    name = "apps.web.backend"
    verbose_name = "Menu Backend"
