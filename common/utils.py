"""Utility helpers shared across apps."""

from decimal import Decimal, InvalidOperation

from django.conf import settings


def to_decimal(value):
    """Convert stored numeric values to Decimal."""

    if value is None:
        return Decimal("0")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")


def format_currency(amount):
    """Return a price in Brazilian notation, e.g. ``R$ 1.234,56``."""

    symbol = getattr(settings, "STORE_CURRENCY_SYMBOL", "R$")
    formatted = f"{to_decimal(amount):,.2f}"
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{symbol} {formatted}"


def installments(amount, count=10):
    """Installment value shown under prices in the mock storefront."""

    if count <= 0:
        return to_decimal(amount)
    return (to_decimal(amount) / count).quantize(Decimal("0.01"))
