import json
import logging
import uuid

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from django.views.generic import TemplateView

from themes.package import build_theme_package, package_to_json, package_to_zip
from themes.services import get_theme_by_id
from themes.views import ThemeManagerAccessMixin
from .forms import CheckoutForm, OrderStatusForm
from .models import Order

logger = logging.getLogger(__name__)

REQUIRED_ORDER_FIELDS = ("theme_id", "customer_name", "customer_email")


def _request_payload(request):
    if request.content_type == "application/json":
        try:
            payload = json.loads(request.body or b"{}")
        except ValueError:
            return None
        return payload if isinstance(payload, dict) else None
    return request.POST.dict()


@csrf_exempt
def create_order(request):
    """POST /api/orders/ - register a pending order for a published theme."""
    if request.method != "POST":
        response = JsonResponse({"error": "Method not allowed"}, status=405)
        response["Allow"] = "POST"
        return response

    payload = _request_payload(request)
    if payload is None:
        return JsonResponse({"error": "Invalid JSON body"}, status=400)
    missing = [name for name in REQUIRED_ORDER_FIELDS if not str(payload.get(name) or "").strip()]
    if missing:
        return JsonResponse(
            {"error": "Required fields: theme_id, customer_name, customer_email", "missing": missing},
            status=400,
        )

    theme = get_theme_by_id(payload["theme_id"])
    if theme is None or not theme.is_published:
        return JsonResponse({"error": "Theme not found"}, status=404)

    form = CheckoutForm(
        {
            "customer_name": str(payload["customer_name"]).strip(),
            "customer_email": str(payload["customer_email"]).strip(),
            "notes": str(payload.get("notes") or ""),
        }
    )
    if not form.is_valid():
        return JsonResponse({"error": "Invalid order", "fields": form.errors.get_json_data()}, status=400)

    order = form.save(commit=False)
    order.theme = theme
    order.status = Order.Status.PENDING
    order.save()
    logger.info("Order %s created for theme %s", order.pk, theme.slug)
    return JsonResponse({"order": order.as_dict()}, status=201)


def _find_order(order_id, token):
    try:
        return (
            Order.objects.select_related("theme")
            .filter(pk=int(order_id), download_token=uuid.UUID(str(token)))
            .first()
        )
    except ValueError:
        return None


@require_GET
def download_theme(request):
    """GET /api/themes/download/?order_id=&token=&format=json|zip - paid orders only."""
    order_id = request.GET.get("order_id")
    token = request.GET.get("token")
    package_format = request.GET.get("format", "json")
    if not order_id or not token:
        return JsonResponse({"error": "order_id and token are required"}, status=400)
    order = _find_order(order_id, token)
    if order is None:
        logger.warning("Download refused for order id %r: unknown order or token", order_id)
        return JsonResponse({"error": "Order not found"}, status=404)
    if not order.can_download:
        return JsonResponse(
            {
                "error": "Download not available",
                "message": "Payment has not been confirmed yet",
                "status": order.status,
            },
            status=403,
        )

    package = build_theme_package(order.theme, order.license_type)
    if order.mark_delivered():
        logger.info("Order %s delivered", order.pk)

    slug = package["meta"]["slug"]
    if package_format == "zip":
        response = HttpResponse(package_to_zip(package), content_type="application/zip")
        response["Content-Disposition"] = f'attachment; filename="{slug}-theme.zip"'
        return response
    response = HttpResponse(package_to_json(package), content_type="application/json")
    response["Content-Disposition"] = f'attachment; filename="{slug}-theme.json"'
    return response


class OrderListView(ThemeManagerAccessMixin, TemplateView):
    template_name = "orders/order_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        status = self.request.GET.get("status")
        orders = Order.objects.select_related("theme").order_by("-created_at")
        if status in Order.Status.values:
            orders = orders.filter(status=status)
        context["orders"] = orders
        context["status_choices"] = Order.Status.choices
        context["current_status"] = status
        return context


@staff_member_required
@require_POST
def update_order_status(request, pk):
    order = get_object_or_404(Order, pk=pk)
    form = OrderStatusForm(request.POST, instance=order)
    if form.is_valid():
        form.save()
        messages.success(request, f"Order #{order.pk} marked as {order.get_status_display()}.")
    else:
        messages.error(request, "Invalid status.")
    return redirect("orders:order_list")
