from django.db import models

from .colors import ColorConfig


class Theme(models.Model):
    """A purchasable storefront skin: colors, page CSS, widgets, banners."""

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLISHED = "published", "Published"
        ARCHIVED = "archived", "Archived"

    name = models.CharField(max_length=128)
    slug = models.SlugField(unique=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    thumbnail_url = models.URLField(max_length=500, blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.DRAFT
    )
    color_config = models.JSONField(
        default=dict,
        blank=True,
        help_text="The 13 platform color slots; missing slots fall back to defaults.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self):
        return self.name

    @property
    def colors(self):
        return ColorConfig.from_mapping(self.color_config)

    @property
    def is_published(self):
        return self.status == self.Status.PUBLISHED


class ThemeCss(models.Model):
    """Custom CSS of one theme page."""

    class PageType(models.TextChoices):
        HOME = "home", "Home"
        PRODUCT = "product", "Product"
        CART = "cart", "Cart"

    theme = models.ForeignKey(Theme, related_name="css_pages", on_delete=models.CASCADE)
    page_type = models.CharField(max_length=16, choices=PageType.choices)
    css_code = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("theme", "page_type")
        constraints = [
            models.UniqueConstraint(
                fields=("theme", "page_type"), name="unique_theme_css_page"
            ),
        ]

    def __str__(self):
        return f"{self.theme.slug} - {self.get_page_type_display()}"


class ThemeWidget(models.Model):
    """Author-written HTML/CSS fragment shown on the theme's storefront."""

    class WidgetType(models.TextChoices):
        HTML = "html", "HTML"
        IMAGE_SLIDER = "image_slider", "Image Slider"
        PRODUCT_CAROUSEL = "product_carousel", "Product Carousel"
        TEXT = "text", "Text"
        BANNER = "banner", "Banner"
        CUSTOM = "custom", "Custom"

    theme = models.ForeignKey(Theme, related_name="widgets", on_delete=models.CASCADE)
    name = models.CharField(max_length=255)
    widget_type = models.CharField(
        max_length=32, choices=WidgetType.choices, default=WidgetType.HTML
    )
    html_content = models.TextField(
        blank=True,
        help_text="Raw markup; normalized and sanitized on every render.",
    )
    config = models.JSONField(default=dict, blank=True)
    display_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("display_order", "id")

    def __str__(self):
        return f"{self.theme.slug} - {self.name}"


class ThemeBanner(models.Model):
    """Desktop/mobile banner images of a theme."""

    theme = models.ForeignKey(Theme, related_name="banners", on_delete=models.CASCADE)
    name = models.CharField(max_length=255)
    image_desktop = models.URLField(max_length=500)
    image_mobile = models.URLField(max_length=500, blank=True)
    link_url = models.URLField(max_length=500, blank=True)
    display_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("display_order", "id")

    def __str__(self):
        return self.name


class DemoProduct(models.Model):
    """Products shown in the mocked storefront."""

    class Category(models.TextChoices):
        CALCADOS = "calcados", "Calçados"
        ELETRONICOS = "eletronicos", "Eletrônicos"
        INFANTIL = "infantil", "Infantil"
        MODA = "moda", "Moda"
        ACESSORIOS = "acessorios", "Acessórios"
        CASA = "casa", "Casa"

    class Badge(models.TextChoices):
        NOVO = "novo", "Novo"
        PROMOCAO = "promocao", "Promoção"
        MAIS_VENDIDO = "mais_vendido", "Mais vendido"

    theme = models.ForeignKey(
        Theme,
        null=True,
        blank=True,
        related_name="products",
        on_delete=models.CASCADE,
        help_text="Leave empty to share the product across every theme preview.",
    )
    name = models.CharField(max_length=255)
    slug = models.SlugField()
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    original_price = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    category = models.CharField(max_length=32, choices=Category.choices)
    image_url = models.URLField(max_length=500)
    badge = models.CharField(max_length=32, choices=Badge.choices, blank=True)
    is_active = models.BooleanField(default=True)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("display_order", "id")

    def __str__(self):
        return self.name

    @property
    def discount_percent(self):
        if not self.original_price or self.original_price <= self.price:
            return 0
        return int(round((1 - self.price / self.original_price) * 100))
