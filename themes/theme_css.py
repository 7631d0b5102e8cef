"""Build the theme `:root` block of CSS custom properties from a ColorConfig."""

import re
from typing import List, Tuple

from .colors import COLOR_FIELDS, ColorConfig

GENERATED_BEGIN = "/* vizzutemas:cores:inicio - CSS base gerado das cores */"
GENERATED_END = "/* vizzutemas:cores:fim */"

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_HEADER = """/* ========================================
   VARIÁVEIS DE CORES DO TEMA - VIZZUTEMAS
   ======================================== */"""

# Derived rules only reference the variables, never redeclare them.
_UTILITY_RULES = """body {
  background-color: var(--cor-fundo-pagina);
}

.header, .navbar {
  background-color: var(--cor-fundo-cabecalho);
}

.header-top, .top-bar {
  background-color: var(--cor-fundo-barra-superior);
}

.header-buttons, .header .btn, .header a {
  color: var(--cor-botoes-cabecalho);
}

.btn-enviar, .btn-checkout, .btn-comprar {
  background-color: var(--cor-botao-enviar-pedido);
  border-color: var(--cor-botao-enviar-pedido);
  color: #ffffff;
}

.btn-enviar:hover, .btn-comprar:hover {
  filter: brightness(1.1);
}

.btn-secondary, .btn-outline, .btn-add-cart {
  background-color: var(--cor-demais-botoes);
  border-color: var(--cor-demais-botoes);
  color: #ffffff;
}

.details, .icon, .link-destaque, .badge, .tag {
  color: var(--cor-detalhes-gerais);
  border-color: var(--cor-detalhes-gerais);
}

.catalog-banner, .banner-categoria {
  background-color: var(--cor-fundo-banner-catalogo);
}

.menu-desktop, .nav-desktop {
  background-color: var(--cor-fundo-menu-desktop);
}

.submenu-desktop, .dropdown-menu {
  background-color: var(--cor-fundo-submenu-desktop);
}

.menu-mobile, .nav-mobile, .mobile-menu {
  background-color: var(--cor-fundo-menu-mobile);
}

.footer {
  background-color: var(--cor-fundo-rodape);
  color: #ffffff;
}

.card, .product-card, .box, .panel {
  background-color: var(--cor-detalhes-fundo);
}"""


def css_variable_name(field: str) -> str:
    """`cor_botao_enviar_pedido` / `corBotaoEnviarPedido` -> `--cor-botao-enviar-pedido`."""
    kebab = _CAMEL_BOUNDARY_RE.sub("-", field).replace("_", "-").lower()
    return f"--{kebab}"


def css_variables(colors: ColorConfig) -> List[Tuple[str, str]]:
    """Ordered (property, value) pairs for the 13 color slots."""
    return [(css_variable_name(name), getattr(colors, name)) for name in COLOR_FIELDS]


def generate_theme_css(colors: ColorConfig) -> str:
    """Return the theme `:root` block followed by the derived utility rules.

    ``colors`` must be complete; merge stored values with
    ``ColorConfig.from_mapping`` first.
    """
    declarations = "\n".join(
        f"  {name}: {value};" for name, value in css_variables(colors)
    )
    return f"{_HEADER}\n\n:root {{\n{declarations}\n}}\n\n{_UTILITY_RULES}\n"


def apply_generated_css(existing: str, colors: ColorConfig) -> str:
    """Insert or refresh the generated section inside custom page CSS.

    The section lives between GENERATED_BEGIN and GENERATED_END; anything the
    author wrote outside the markers is kept untouched.
    """
    existing = existing or ""
    section = f"{GENERATED_BEGIN}\n{generate_theme_css(colors)}{GENERATED_END}"
    start = existing.find(GENERATED_BEGIN)
    end = existing.find(GENERATED_END, start + 1) if start != -1 else -1
    if start != -1 and end != -1:
        return existing[:start] + section + existing[end + len(GENERATED_END):]
    if not existing.strip():
        return section
    return f"{existing.rstrip()}\n\n{section}"


def compose_page_css(colors: ColorConfig, page_css: str) -> str:
    """Theme variables first, then the page's custom CSS."""
    base = generate_theme_css(colors)
    if not page_css:
        return base
    return f"{base}\n{page_css}"
