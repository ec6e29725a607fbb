"""Django app configuration for the admin panel."""

from django.apps import AppConfig


class AdminPanelConfig(AppConfig):
    """Admin panel app configuration."""

    name = "apps.web.admin_panel"
    verbose_name = "Admin Panel"
