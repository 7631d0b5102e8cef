"""URLconf for order management."""

from django.urls import path

from . import views

app_name = "orders"

urlpatterns = [
    path("", views.OrderListView.as_view(), name="order_list"),
    path("<int:pk>/status/", views.update_order_status, name="update_status"),
]
