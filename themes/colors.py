"""Theme color configuration (the 13 platform color slots)."""

import re
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ColorConfig:
    """Complete color configuration of a theme, same slots as the platform."""

    cor_fundo_pagina: str = "#ffffff"
    cor_detalhes_fundo: str = "#f8f9fa"
    cor_fundo_barra_superior: str = "#1a1a2e"
    cor_botoes_cabecalho: str = "#e94560"
    cor_fundo_cabecalho: str = "#ffffff"
    cor_botao_enviar_pedido: str = "#e94560"
    cor_demais_botoes: str = "#6c757d"
    cor_detalhes_gerais: str = "#e94560"
    cor_fundo_banner_catalogo: str = "#f8f9fa"
    cor_fundo_menu_desktop: str = "#ffffff"
    cor_fundo_submenu_desktop: str = "#f8f9fa"
    cor_fundo_menu_mobile: str = "#ffffff"
    cor_fundo_rodape: str = "#1a1a2e"

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ColorConfig":
        """Merge a (possibly partial) stored mapping over the defaults.

        Unknown keys and blank values are ignored.
        """
        values = {}
        for name in COLOR_FIELDS:
            value = (data or {}).get(name)
            if isinstance(value, str) and value.strip():
                values[name] = value.strip()
        return cls(**values)

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


COLOR_FIELDS = tuple(f.name for f in fields(ColorConfig))

COLOR_LABELS = {
    "cor_fundo_pagina": "Cor do fundo da página",
    "cor_detalhes_fundo": "Cor dos detalhes do fundo da página",
    "cor_fundo_barra_superior": "Cor do fundo da barra superior",
    "cor_botoes_cabecalho": "Cor dos botões do cabeçalho",
    "cor_fundo_cabecalho": "Cor do fundo do cabeçalho",
    "cor_botao_enviar_pedido": "Cor do botão enviar pedido",
    "cor_demais_botoes": "Cor dos demais botões",
    "cor_detalhes_gerais": "Cor dos detalhes gerais",
    "cor_fundo_banner_catalogo": "Cor do fundo do banner do catálogo",
    "cor_fundo_menu_desktop": "Cor do fundo do menu desktop",
    "cor_fundo_submenu_desktop": "Cor do fundo do submenu desktop",
    "cor_fundo_menu_mobile": "Cor do fundo do menu mobile",
    "cor_fundo_rodape": "Cor do fundo do rodapé",
}

COLOR_GROUPS = {
    "Página": ["cor_fundo_pagina", "cor_detalhes_fundo"],
    "Barra Superior": ["cor_fundo_barra_superior"],
    "Cabeçalho": ["cor_fundo_cabecalho", "cor_botoes_cabecalho"],
    "Botões": ["cor_botao_enviar_pedido", "cor_demais_botoes", "cor_detalhes_gerais"],
    "Menus": ["cor_fundo_menu_desktop", "cor_fundo_submenu_desktop", "cor_fundo_menu_mobile"],
    "Outros": ["cor_fundo_banner_catalogo", "cor_fundo_rodape"],
}

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\(\s*[0-9.,%\s/]+\)$", re.IGNORECASE)
_NAMED_RE = re.compile(r"^[a-zA-Z]{3,32}$")


def is_css_color(value):
    """Loose check that a value is a single CSS color token."""
    if not isinstance(value, str):
        return False
    value = value.strip()
    return bool(
        _HEX_RE.match(value) or _FUNC_RE.match(value) or _NAMED_RE.match(value)
    )
