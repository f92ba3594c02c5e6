# src/holisatis/options/archive.py
"""
Opções de geração de arquivos dist (bloco `archive`) do Satis.

Campos usuais do bloco:
    - directory   → diretório de saída (obrigatório para exportar o bloco)
    - format      → formato do arquivo (zip, tar)
    - skip-dev    → ignora versões de desenvolvimento
    - whitelist / blacklist, prefix-url, absolute-directory, checksum

Decisões arquiteturais:
    - `set` aplica merge sobre os campos existentes (deep_merge)
    - `disable` apenas suprime o export; os campos são preservados
    - O primeiro `set` habilita as opções implicitamente
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping

from holisatis.core.defaults import KEY_ARCHIVE
from holisatis.core.merge import deep_merge


class ArchiveOptions:
    """Fragmento `archive` do documento."""

    def __init__(self) -> None:
        self._enabled = False
        self._fields: Dict[str, Any] = {}

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def fields(self) -> Dict[str, Any]:
        """Cópia dos campos atuais, mesmo quando desabilitado."""
        return deepcopy(self._fields)

    def set(self, options: Mapping[str, Any]) -> "ArchiveOptions":
        """
        Aplica `options` sobre os campos atuais e habilita o bloco.

        Raises:
            ConfigTypeConflictError: Se um campo mudar de tipo estrutural.
                Os campos atuais permanecem inalterados.
        """
        self._fields = deep_merge(self._fields, options)
        self._enabled = True
        return self

    def disable(self) -> "ArchiveOptions":
        self._enabled = False
        return self

    def get(self) -> Dict[str, Any]:
        if not self._enabled or not self._fields.get("directory"):
            return {}
        return {KEY_ARCHIVE: deepcopy(self._fields)}

    def __repr__(self) -> str:
        return f"ArchiveOptions(enabled={self._enabled!r}, fields={self._fields!r})"
