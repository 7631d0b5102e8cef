"""URLconf for theme management."""

from django.urls import path

from . import views

app_name = "themes"

urlpatterns = [
    path("", views.ThemeListView.as_view(), name="theme_list"),
    path("themes/new/", views.ThemeCreateView.as_view(), name="theme_create"),
    path("themes/<int:pk>/", views.ThemeEditView.as_view(), name="theme_edit"),
    path("themes/<int:pk>/colors/", views.ThemeColorsView.as_view(), name="theme_colors"),
    path("themes/<int:pk>/css/", views.ThemeCssView.as_view(), name="theme_css"),
    path("themes/<int:pk>/widgets/", views.ThemeWidgetsView.as_view(), name="theme_widgets"),
    path(
        "themes/<int:pk>/widgets/reorder/",
        views.WidgetReorderView.as_view(),
        name="widget_reorder",
    ),
]
