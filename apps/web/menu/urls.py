"""
URL routing for the public menu.
"""

from django.urls import path

from apps.web.menu import views

app_name = "menu"

urlpatterns = [
    path("", views.menu_page, name="home"),
    path("locale", views.set_locale, name="set_locale"),
]
