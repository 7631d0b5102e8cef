"""URLconf for the public storefront pages."""

from django.urls import path

from . import views

app_name = "storefront"

urlpatterns = [
    path("", views.CatalogueView.as_view(), name="catalogue"),
    path("themes/<slug:slug>/", views.ThemeDetailView.as_view(), name="theme_detail"),
    path("preview/embed/<slug:slug>/", views.EmbedPreviewView.as_view(), name="preview_embed"),
    path("preview/<slug:slug>/", views.PreviewView.as_view(), name="preview"),
    path("checkout/success/", views.CheckoutSuccessView.as_view(), name="checkout_success"),
    path("checkout/<slug:slug>/", views.CheckoutView.as_view(), name="checkout"),
]
