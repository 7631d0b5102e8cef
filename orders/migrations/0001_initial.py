import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("themes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=255)),
                ("customer_email", models.EmailField(max_length=254)),
                ("notes", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("paid", "Paid"), ("cancelled", "Cancelled"), ("delivered", "Delivered")], default="pending", max_length=16)),
                ("license_type", models.CharField(choices=[("single-site", "Single site"), ("multi-site", "Multi site"), ("unlimited", "Unlimited")], default="single-site", max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("delivered_at", models.DateTimeField(blank=True, null=True)),
                ("download_token", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("theme", models.ForeignKey(on_delete=models.deletion.PROTECT, related_name="orders", to="themes.theme")),
            ],
            options={"ordering": ("-created_at",)},
        ),
    ]
