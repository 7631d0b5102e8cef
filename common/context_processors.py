"""Context processors shared across templates."""

from django.conf import settings


def site_context(request):
    """Expose site-wide flags to every template."""

    user = getattr(request, "user", None)
    return {
        "site_name": "Vizzutemas",
        "currency_symbol": getattr(settings, "STORE_CURRENCY_SYMBOL", "R$"),
        "is_theme_manager": bool(user and getattr(user, "is_staff", False)),
    }
