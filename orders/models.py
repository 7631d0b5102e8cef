import uuid

from django.db import models
from django.utils import timezone

from themes.models import Theme


class Order(models.Model):
    """Purchase of a theme by a store owner."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"
        CANCELLED = "cancelled", "Cancelled"
        DELIVERED = "delivered", "Delivered"

    class License(models.TextChoices):
        SINGLE_SITE = "single-site", "Single site"
        MULTI_SITE = "multi-site", "Multi site"
        UNLIMITED = "unlimited", "Unlimited"

    theme = models.ForeignKey(Theme, related_name="orders", on_delete=models.PROTECT)
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField()
    notes = models.TextField(blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    license_type = models.CharField(
        max_length=16, choices=License.choices, default=License.SINGLE_SITE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    delivered_at = models.DateTimeField(null=True, blank=True)
    download_token = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self):
        return f"#{self.pk} {self.theme} - {self.customer_email}"

    @property
    def can_download(self):
        return self.status in {self.Status.PAID, self.Status.DELIVERED}

    def mark_delivered(self):
        if self.status != self.Status.PAID:
            return False
        self.status = self.Status.DELIVERED
        self.delivered_at = timezone.now()
        self.save(update_fields=["status", "delivered_at"])
        return True

    def as_dict(self):
        return {
            "id": self.pk,
            "theme_id": self.theme_id,
            "theme_name": self.theme.name,
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "notes": self.notes,
            "status": self.status,
            "license_type": self.license_type,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "download_token": str(self.download_token),
        }
