"""Downloadable theme package delivered to customers after payment."""

import io
import json
import zipfile

from django.utils import timezone

from .colors import COLOR_LABELS
from .normalizer import normalize_widget_html
from .sanitizer import sanitize_widget_html
from .services import css_by_page, get_active_widgets
from .theme_css import css_variable_name, generate_theme_css

PACKAGE_VERSION = "1.0.0"

_README_TEMPLATE = """# {name}

> Tema gerado pela plataforma Vizzutemas

## Conteúdo do pacote

- `config.json` - configuração do tema (cores e licença)
- `widgets.json` - widgets do tema, já normalizados e sanitizados
- `styles.css` - CSS do tema pronto para uso
- `README.md` - este arquivo

## Como usar

Adicione o CSS no `<head>` da sua loja:

```html
<link rel="stylesheet" href="styles.css">
```

## Variáveis disponíveis

| Variável | Descrição |
|----------|-----------|
{rows}
"""


def _styles(theme):
    parts = [generate_theme_css(theme.colors)]
    for page_type, css in css_by_page(theme).items():
        if css.strip():
            parts.append(f"/* Página: {page_type} */\n{css.strip()}\n")
    return "\n".join(parts)


def _widgets(theme):
    return [
        {
            "id": widget.pk,
            "type": widget.widget_type,
            "name": widget.name,
            "order": widget.display_order,
            "html": sanitize_widget_html(normalize_widget_html(widget.html_content)),
            "settings": widget.config or {},
        }
        for widget in get_active_widgets(theme)
    ]


def _readme(theme):
    rows = "\n".join(
        f"| `{css_variable_name(name)}` | {label} |" for name, label in COLOR_LABELS.items()
    )
    return _README_TEMPLATE.format(name=theme.name, rows=rows)


def build_theme_package(theme, license_type="single-site"):
    return {
        "meta": {
            "name": theme.name,
            "slug": theme.slug,
            "version": PACKAGE_VERSION,
            "generated_at": timezone.now().isoformat(),
            "license": license_type,
        },
        "config": {"colors": theme.colors.as_dict()},
        "widgets": _widgets(theme),
        "css": _styles(theme),
        "readme": _readme(theme),
    }


def package_to_json(package):
    return json.dumps(package, ensure_ascii=False, indent=2)


def package_to_zip(package):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(
            "config.json",
            json.dumps({"meta": package["meta"], **package["config"]}, ensure_ascii=False, indent=2),
        )
        archive.writestr("widgets.json", json.dumps(package["widgets"], ensure_ascii=False, indent=2))
        archive.writestr("styles.css", package["css"])
        archive.writestr("README.md", package["readme"])
    return buffer.getvalue()
