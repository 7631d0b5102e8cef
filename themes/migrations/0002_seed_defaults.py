from django.db import migrations


def seed_themes(apps, schema_editor):
    Theme = apps.get_model("themes", "Theme")
    ThemeCss = apps.get_model("themes", "ThemeCss")
    ThemeWidget = apps.get_model("themes", "ThemeWidget")
    DemoProduct = apps.get_model("themes", "DemoProduct")

    theme, created = Theme.objects.get_or_create(
        slug="vizzu-classico",
        defaults={
            "name": "Vizzu Clássico",
            "description": "Tema base da plataforma, usado como ponto de partida.",
            "price": "0.00",
            "status": "draft",
            "color_config": {},
        },
    )
    if not created:
        return

    for page_type in ("home", "product", "cart"):
        ThemeCss.objects.get_or_create(theme=theme, page_type=page_type, defaults={"css_code": ""})

    ThemeWidget.objects.create(
        theme=theme,
        name="Faixa de boas-vindas",
        widget_type="html",
        display_order=1,
        html_content=(
            "<style>.vz-welcome{padding:24px;text-align:center;"
            "background:var(--cor-detalhes-fundo)}</style>"
            "<section class=\"vz-welcome\"><h2>Bem-vindo à loja</h2>"
            "<p>Frete grátis nas compras acima de R$ 199.</p></section>"
        ),
    )

    def add_product(order, name, slug, category, price, original=None, badge=""):
        DemoProduct.objects.get_or_create(
            slug=slug,
            theme=None,
            defaults={
                "name": name,
                "category": category,
                "price": price,
                "original_price": original,
                "badge": badge,
                "image_url": f"https://picsum.photos/seed/{slug}/600/600",
                "display_order": order,
                "is_active": True,
            },
        )

    add_product(1, "Tênis Runner", "tenis-runner", "calcados", "299.90", "349.90", "promocao")
    add_product(2, "Fone Bluetooth", "fone-bluetooth", "eletronicos", "189.00", badge="novo")
    add_product(3, "Camiseta Básica", "camiseta-basica", "moda", "59.90", badge="mais_vendido")
    add_product(4, "Mochila Urbana", "mochila-urbana", "acessorios", "159.00")
    add_product(5, "Luminária de Mesa", "luminaria-mesa", "casa", "119.90", "149.90")
    add_product(6, "Conjunto Infantil", "conjunto-infantil", "infantil", "89.90")


class Migration(migrations.Migration):

    dependencies = [
        ("themes", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_themes, migrations.RunPython.noop),
    ]
