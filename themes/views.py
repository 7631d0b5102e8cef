"""Management UI for themes (staff only)."""

import json
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.forms import modelformset_factory
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.views import View
from django.views.generic import FormView, TemplateView

from .colors import COLOR_GROUPS
from .forms import PageCssForm, ThemeColorsForm, ThemeForm, ThemeWidgetForm
from .models import Theme, ThemeCss, ThemeWidget
from . import services

logger = logging.getLogger(__name__)


class ThemeManagerAccessMixin(LoginRequiredMixin, UserPassesTestMixin):
    def test_func(self):
        return self.request.user.is_staff

    def handle_no_permission(self):
        if not self.request.user.is_authenticated:
            return super().handle_no_permission()
        messages.error(self.request, "Staff access required.")
        return redirect("storefront:catalogue")


class ThemeObjectMixin:
    """Resolves ``self.theme`` from the ``pk`` URL kwarg."""

    def dispatch(self, request, *args, **kwargs):
        self.theme = get_object_or_404(Theme, pk=kwargs["pk"])
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["theme"] = self.theme
        return context


class ThemeListView(ThemeManagerAccessMixin, TemplateView):
    template_name = "themes/theme_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["themes"] = services.list_themes()
        return context


class ThemeCreateView(ThemeManagerAccessMixin, FormView):
    template_name = "themes/theme_form.html"
    form_class = ThemeForm

    def form_valid(self, form):
        theme = form.save()
        messages.success(self.request, "Theme created.")
        return redirect("themes:theme_edit", pk=theme.pk)


class ThemeEditView(ThemeManagerAccessMixin, ThemeObjectMixin, FormView):
    template_name = "themes/theme_form.html"
    form_class = ThemeForm

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = self.theme
        return kwargs

    def form_valid(self, form):
        form.save()
        messages.success(self.request, "Theme saved.")
        return redirect("themes:theme_edit", pk=self.theme.pk)


class ThemeColorsView(ThemeManagerAccessMixin, ThemeObjectMixin, FormView):
    template_name = "themes/theme_colors.html"
    form_class = ThemeColorsForm

    def get_initial(self):
        return self.theme.colors.as_dict()

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["colors"] = self.theme.colors
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        form = context["form"]
        context["color_groups"] = [
            (group, [form[name] for name in names]) for group, names in COLOR_GROUPS.items()
        ]
        return context

    def form_valid(self, form):
        services.update_theme_colors(self.theme, form.to_colors())
        messages.success(self.request, "Colors saved.")
        return redirect("themes:theme_colors", pk=self.theme.pk)


class ThemeCssView(ThemeManagerAccessMixin, ThemeObjectMixin, FormView):
    template_name = "themes/theme_css.html"
    form_class = PageCssForm

    def _page_type(self):
        page = self.request.GET.get("page") or self.request.POST.get("page_type")
        return page if page in services.PAGE_TYPES else ThemeCss.PageType.HOME

    def get_initial(self):
        page_type = self._page_type()
        return {
            "page_type": page_type,
            "css_code": services.get_page_css(self.theme, page_type),
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_type"] = self._page_type()
        context["page_types"] = ThemeCss.PageType.choices
        return context

    def form_valid(self, form):
        page_type = form.cleaned_data["page_type"]
        css_code = form.cleaned_data["css_code"]
        if self.request.POST.get("action") == "regenerate":
            services.regenerate_page_css(self.theme, page_type, css_code)
            messages.success(self.request, "Base CSS generated from the theme colors.")
        else:
            services.upsert_page_css(self.theme, page_type, css_code)
            messages.success(self.request, f"CSS for page {page_type} saved.")
        return redirect(f"{reverse('themes:theme_css', kwargs={'pk': self.theme.pk})}?page={page_type}")


class ThemeWidgetsView(ThemeManagerAccessMixin, ThemeObjectMixin, TemplateView):
    template_name = "themes/theme_widgets.html"

    def get_formset_class(self):
        return modelformset_factory(
            ThemeWidget,
            form=ThemeWidgetForm,
            extra=1,
            can_delete=True,
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        WidgetFormSet = self.get_formset_class()
        context["widget_formset"] = kwargs.get("widget_formset") or WidgetFormSet(
            queryset=self.theme.widgets.all().order_by("display_order", "id")
        )
        return context

    def post(self, request, *args, **kwargs):
        WidgetFormSet = self.get_formset_class()
        formset = WidgetFormSet(
            request.POST,
            queryset=self.theme.widgets.all().order_by("display_order", "id"),
        )
        if formset.is_valid():
            widgets = formset.save(commit=False)
            for widget in widgets:
                widget.theme = self.theme
                widget.save()
            for widget in formset.deleted_objects:
                widget.delete()
            messages.success(self.request, "Widgets updated.")
            return redirect("themes:theme_widgets", pk=self.theme.pk)
        return self.render_to_response(self.get_context_data(widget_formset=formset))


class WidgetReorderView(ThemeManagerAccessMixin, ThemeObjectMixin, View):
    """POST ``{"order": [widget ids]}`` to rewrite display_order."""

    http_method_names = ["post"]

    def post(self, request, *args, **kwargs):
        try:
            payload = json.loads(request.body or b"{}")
        except ValueError:
            return JsonResponse({"ok": False, "error": "Invalid JSON"}, status=400)
        order = payload.get("order") if isinstance(payload, dict) else None
        if not isinstance(order, list):
            return JsonResponse({"ok": False, "error": "order must be a list"}, status=400)
        updated = services.reorder_widgets(self.theme, order)
        logger.info("Reordered %s widgets of theme %s", updated, self.theme.slug)
        return JsonResponse({"ok": True, "updated": updated})

