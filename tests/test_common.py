"""
Tests for shared helpers: currency formatting, audit middleware, context.
"""

from decimal import Decimal

import pytest
from django.http import HttpResponse
from django.test import RequestFactory

from common.context_processors import site_context
from common.middleware import ActivityLogMiddleware
from common.models import ActivityLog, ErrorLog
from common.utils import format_currency, installments, to_decimal


class TestCurrency:

    def test_brazilian_format(self):
        assert format_currency(Decimal("1234.56")) == "R$ 1.234,56"
        assert format_currency("59.9") == "R$ 59,90"
        assert format_currency(None) == "R$ 0,00"

    def test_symbol_from_settings(self, settings):
        settings.STORE_CURRENCY_SYMBOL = "US$"
        assert format_currency(10) == "US$ 10,00"

    def test_installments(self):
        assert installments(Decimal("299.90")) == Decimal("29.99")
        assert installments(100, 0) == Decimal("100")

    def test_to_decimal_invalid(self):
        assert to_decimal("abc") == Decimal("0")


@pytest.mark.django_db
class TestActivityLogMiddleware:

    def test_request_logged(self, client):
        client.get("/")
        entry = ActivityLog.objects.get(path="/")
        assert entry.method == "GET"
        assert entry.status_code == 200

    def test_static_skipped(self, client):
        client.get("/static/app.css")
        assert not ActivityLog.objects.filter(path="/static/app.css").exists()

    def test_exception_recorded(self):
        request = RequestFactory().get("/quebrado/")
        middleware = ActivityLogMiddleware(lambda req: HttpResponse())
        assert middleware.process_exception(request, ValueError("boom")) is None
        error = ErrorLog.objects.get(path="/quebrado/")
        assert error.message == "boom"
        assert error.status_code == 500


class TestSiteContext:

    def test_staff_flag(self, rf, django_user_model, db):
        request = rf.get("/")
        request.user = django_user_model(username="x", is_staff=True)
        context = site_context(request)
        assert context["is_theme_manager"] is True
        assert context["currency_symbol"] == "R$"

    def test_without_user(self, rf):
        assert site_context(rf.get("/"))["is_theme_manager"] is False
