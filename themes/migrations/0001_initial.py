from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Theme",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=128)),
                ("slug", models.SlugField(unique=True)),
                ("description", models.TextField(blank=True)),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("thumbnail_url", models.URLField(blank=True, max_length=500)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("published", "Published"), ("archived", "Archived")], default="draft", max_length=16)),
                ("color_config", models.JSONField(blank=True, default=dict, help_text="The 13 platform color slots; missing slots fall back to defaults.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ("-created_at",)},
        ),
        migrations.CreateModel(
            name="ThemeCss",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("page_type", models.CharField(choices=[("home", "Home"), ("product", "Product"), ("cart", "Cart")], max_length=16)),
                ("css_code", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("theme", models.ForeignKey(on_delete=models.deletion.CASCADE, related_name="css_pages", to="themes.theme")),
            ],
            options={"ordering": ("theme", "page_type")},
        ),
        migrations.AddConstraint(
            model_name="themecss",
            constraint=models.UniqueConstraint(fields=("theme", "page_type"), name="unique_theme_css_page"),
        ),
        migrations.CreateModel(
            name="ThemeWidget",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("widget_type", models.CharField(choices=[("html", "HTML"), ("image_slider", "Image Slider"), ("product_carousel", "Product Carousel"), ("text", "Text"), ("banner", "Banner"), ("custom", "Custom")], default="html", max_length=32)),
                ("html_content", models.TextField(blank=True, help_text="Raw markup; normalized and sanitized on every render.")),
                ("config", models.JSONField(blank=True, default=dict)),
                ("display_order", models.IntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("theme", models.ForeignKey(on_delete=models.deletion.CASCADE, related_name="widgets", to="themes.theme")),
            ],
            options={"ordering": ("display_order", "id")},
        ),
        migrations.CreateModel(
            name="ThemeBanner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("image_desktop", models.URLField(max_length=500)),
                ("image_mobile", models.URLField(blank=True, max_length=500)),
                ("link_url", models.URLField(blank=True, max_length=500)),
                ("display_order", models.IntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("theme", models.ForeignKey(on_delete=models.deletion.CASCADE, related_name="banners", to="themes.theme")),
            ],
            options={"ordering": ("display_order", "id")},
        ),
        migrations.CreateModel(
            name="DemoProduct",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField()),
                ("description", models.TextField(blank=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("original_price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("category", models.CharField(choices=[("calcados", "Calçados"), ("eletronicos", "Eletrônicos"), ("infantil", "Infantil"), ("moda", "Moda"), ("acessorios", "Acessórios"), ("casa", "Casa")], max_length=32)),
                ("image_url", models.URLField(max_length=500)),
                ("badge", models.CharField(blank=True, choices=[("novo", "Novo"), ("promocao", "Promoção"), ("mais_vendido", "Mais vendido")], max_length=32)),
                ("is_active", models.BooleanField(default=True)),
                ("display_order", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("theme", models.ForeignKey(blank=True, help_text="Leave empty to share the product across every theme preview.", null=True, on_delete=models.deletion.CASCADE, related_name="products", to="themes.theme")),
            ],
            options={"ordering": ("display_order", "id")},
        ),
    ]
