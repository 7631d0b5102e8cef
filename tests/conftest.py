"""Shared fixtures for the Vizzutemas test suite."""

from decimal import Decimal

import pytest


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

@pytest.fixture
def theme(db):
    """A published theme with custom colors and no widgets."""
    from themes.models import Theme
    return Theme.objects.create(
        name="Aurora",
        slug="aurora",
        description="Tema claro para lojas de moda.",
        price=Decimal("149.90"),
        status=Theme.Status.PUBLISHED,
        color_config={"cor_fundo_pagina": "#fafafa", "cor_fundo_rodape": "#222222"},
    )


@pytest.fixture
def draft_theme(db):
    from themes.models import Theme
    return Theme.objects.create(name="Rascunho", slug="rascunho", status=Theme.Status.DRAFT)


@pytest.fixture
def widgets(theme):
    """Three active widgets plus an inactive one, in display order."""
    from themes.models import ThemeWidget
    return [
        ThemeWidget.objects.create(
            theme=theme, name="Primeiro", display_order=0,
            html_content="<div class='first'>Primeiro</div>",
        ),
        ThemeWidget.objects.create(
            theme=theme, name="Segundo", display_order=1,
            html_content="<div class='second'>Segundo</div>",
        ),
        ThemeWidget.objects.create(
            theme=theme, name="Terceiro", display_order=2,
            html_content="<div class='third'>Terceiro</div>",
        ),
        ThemeWidget.objects.create(
            theme=theme, name="Oculto", display_order=3, is_active=False,
            html_content="<div class='hidden'>Oculto</div>",
        ),
    ]


# ---------------------------------------------------------------------------
# Users and clients
# ---------------------------------------------------------------------------

@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="gestor", password="senha-segura-123", is_staff=True
    )


@pytest.fixture
def regular_user(django_user_model):
    return django_user_model.objects.create_user(
        username="cliente", password="senha-segura-123"
    )


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------

@pytest.fixture
def order(theme):
    from orders.models import Order
    return Order.objects.create(
        theme=theme,
        customer_name="Maria Souza",
        customer_email="maria@example.com",
    )


@pytest.fixture
def paid_order(theme):
    from orders.models import Order
    return Order.objects.create(
        theme=theme,
        customer_name="João Lima",
        customer_email="joao@example.com",
        status=Order.Status.PAID,
    )
