from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path("admin/", admin.site.urls),
    path("manage/", include(("themes.urls", "themes"), namespace="themes")),
    path("manage/orders/", include(("orders.urls", "orders"), namespace="orders")),
    path("api/", include(("orders.api_urls", "orders_api"), namespace="orders_api")),
    path("", include(("storefront.urls", "storefront"), namespace="storefront")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
