# src/holisatis/options/web.py
"""
Opções de saída HTML do Satis.

Controla se a página índice é gerada e com qual template twig.
A renderização em si é responsabilidade do renderizador do site.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from holisatis.core.defaults import KEY_OUTPUT_HTML, KEY_TWIG_TEMPLATE


class WebOutputOptions:
    """
    Fragmento `output-html` / `twig-template` do documento.

    Estados:
        - habilitado sem template   → {"output-html": True}
        - habilitado com template   → {"output-html": True, "twig-template": ...}
        - desabilitado              → {"output-html": False}
        - não especificado          → {} (documento importado sem essas chaves)

    Invariantes:
        - `disable()` nunca apaga o template registrado
        - Qualquer setter torna o estado especificado
    """

    def __init__(self, template: Optional[str] = None) -> None:
        self._enabled: Optional[bool] = True
        self._template = template

    @classmethod
    def unspecified(cls) -> "WebOutputOptions":
        options = cls()
        options._enabled = None
        return options

    @property
    def enabled(self) -> bool:
        return bool(self._enabled)

    @property
    def template(self) -> Optional[str]:
        return self._template

    def enable(self) -> "WebOutputOptions":
        self._enabled = True
        return self

    def disable(self) -> "WebOutputOptions":
        self._enabled = False
        return self

    def set(self, template: str) -> "WebOutputOptions":
        """Habilita a saída HTML usando `template`."""
        self._template = template
        self._enabled = True
        return self

    def get(self) -> Dict[str, Any]:
        if self._enabled is None:
            return {}
        if not self._enabled:
            return {KEY_OUTPUT_HTML: False}

        fragment: Dict[str, Any] = {KEY_OUTPUT_HTML: True}
        if self._template is not None:
            fragment[KEY_TWIG_TEMPLATE] = self._template
        return fragment

    def __repr__(self) -> str:
        return f"WebOutputOptions(enabled={self._enabled!r}, template={self._template!r})"
