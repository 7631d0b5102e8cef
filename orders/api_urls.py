"""JSON endpoints used by the checkout page and the customer download link."""

from django.urls import path

from . import views

app_name = "orders_api"

urlpatterns = [
    path("orders/", views.create_order, name="create_order"),
    path("themes/download/", views.download_theme, name="download_theme"),
]
