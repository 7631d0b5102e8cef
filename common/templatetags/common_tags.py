"""Custom template tags for reusable formatting."""

from django import template

from common.utils import format_currency, installments

register = template.Library()


@register.filter
def currency(value):
    return format_currency(value)


@register.filter
def installment(value, count=10):
    return format_currency(installments(value, int(count)))


@register.filter
def dict_get(value, key):
    """Fetch dict entry safely inside templates."""

    if isinstance(value, dict):
        return value.get(key)
    return None
