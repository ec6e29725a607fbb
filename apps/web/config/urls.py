"""
URL configuration for Menu Board.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("apps.web.menu.urls")),
    path("", include("apps.web.admin_panel.urls")),
]
