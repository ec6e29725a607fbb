"""Django app configuration for core module."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app configuration."""

    name = "apps.web.core"
    verbose_name = "Core"
