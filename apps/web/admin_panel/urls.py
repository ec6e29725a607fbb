"""
URL routing for login and the admin panel.

Paths keep the public site's existing URLs (/auth, /adminPanel).
"""

from django.urls import path

from apps.web.admin_panel import views

app_name = "admin_panel"

urlpatterns = [
    path("auth", views.login_view, name="login"),
    path("auth/logout", views.logout_view, name="logout"),
    path("adminPanel", views.panel, name="panel"),
    path("adminPanel/items/new", views.item_create, name="item_create"),
    path("adminPanel/items/<int:item_id>/edit", views.item_edit, name="item_edit"),
    path("adminPanel/items/<int:item_id>/delete", views.item_delete, name="item_delete"),
    path("adminPanel/items/<int:item_id>/stock", views.item_toggle_stock, name="item_stock"),
    path("adminPanel/items/<int:item_id>/flags", views.item_flags, name="item_flags"),
    path("adminPanel/items/<int:item_id>/image", views.item_image, name="item_image"),
    path("adminPanel/items/<int:item_id>/move", views.item_move, name="item_move"),
]
