"""Django app configuration for the public menu."""

from django.apps import AppConfig


class MenuConfig(AppConfig):
    """Public menu app configuration."""

    name = "apps.web.menu"
    verbose_name = "Menu"
