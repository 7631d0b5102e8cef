"""Public pages: theme catalogue, live preview and checkout."""

import logging

from django.http import Http404
from django.shortcuts import get_object_or_404, redirect
from django.views.generic import FormView, TemplateView

from orders.forms import CheckoutForm
from orders.models import Order
from themes.models import Theme, ThemeCss
from themes import services

logger = logging.getLogger(__name__)

DEVICES = ("desktop", "tablet", "mobile")


class CatalogueView(TemplateView):
    template_name = "storefront/catalogue.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["themes"] = services.list_published_themes()
        return context


class ThemeDetailView(TemplateView):
    template_name = "storefront/theme_detail.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        theme = services.get_theme_by_slug(kwargs["slug"])
        if theme is None or not self._visible(theme):
            raise Http404("Theme not found")
        context["theme"] = theme
        context["colors"] = theme.colors
        return context

    def _visible(self, theme):
        return theme.is_published or self.request.user.is_staff


class PreviewMixin:
    """Composes the preview of a theme page (CSS, widgets, banners, products)."""

    def get_page_type(self):
        page = self.request.GET.get("page", ThemeCss.PageType.HOME)
        return page if page in services.PAGE_TYPES else ThemeCss.PageType.HOME

    def get_preview(self, slug):
        preview = services.build_preview(slug, self.get_page_type())
        if preview is None:
            raise Http404("Theme not found")
        if not (preview.theme.is_published or self.request.user.is_staff):
            raise Http404("Theme not found")
        return preview


class PreviewView(PreviewMixin, TemplateView):
    """Preview shell with page/device switcher around the embedded storefront."""

    template_name = "storefront/preview.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        preview = self.get_preview(kwargs["slug"])
        device = self.request.GET.get("device")
        context["preview"] = preview
        context["theme"] = preview.theme
        context["device"] = device if device in DEVICES else "desktop"
        context["devices"] = DEVICES
        context["page_types"] = ThemeCss.PageType.choices
        return context


class EmbedPreviewView(PreviewMixin, TemplateView):
    """The composed storefront page alone, meant to be loaded in an iframe."""

    template_name = "storefront/embed.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        preview = self.get_preview(kwargs["slug"])
        context["preview"] = preview
        context["theme"] = preview.theme
        context["colors"] = preview.colors
        return context


class CheckoutView(FormView):
    template_name = "storefront/checkout.html"
    form_class = CheckoutForm

    def dispatch(self, request, *args, **kwargs):
        self.theme = get_object_or_404(
            Theme, slug=kwargs["slug"], status=Theme.Status.PUBLISHED
        )
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["theme"] = self.theme
        return context

    def form_valid(self, form):
        order = form.save(commit=False)
        order.theme = self.theme
        order.status = Order.Status.PENDING
        order.save()
        logger.info("Checkout order %s for theme %s", order.pk, self.theme.slug)
        self.request.session["last_order_id"] = order.pk
        return redirect("storefront:checkout_success")


class CheckoutSuccessView(TemplateView):
    template_name = "storefront/checkout_success.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        order_id = self.request.session.get("last_order_id")
        context["order"] = (
            Order.objects.select_related("theme").filter(pk=order_id).first()
            if order_id
            else None
        )
        return context
