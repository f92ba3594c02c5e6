# src/holisatis/core/merge.py
"""
Utilitário canônico de deep-merge.

Usado para aplicar opções parciais sobre opções existentes (archive) e
para compor o documento exportado a partir dos defaults.

Política de merge:
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - None no override → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado durante o processo
    - Chaves não sobrescritas são preservadas
"""

from copy import deepcopy
from typing import Any, Dict, Mapping

from .errors import ConfigTypeConflictError


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapeamentos.

    Args:
        base (Mapping[str, Any]): Valores atuais.
        override (Mapping[str, Any]): Valores explícitos a aplicar.

    Returns:
        Dict[str, Any]: Novo dicionário resultante do merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise ConfigTypeConflictError(
            f"Deep-merge requer mapeamentos no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(dict(base))

    for key, override_value in override.items():
        if key not in result or result[key] is None or override_value is None:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list -> sobrescrita total
        if isinstance(base_value, list) and isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        # conflito de tipo
        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        # escalar -> sobrescrita
        result[key] = deepcopy(override_value)

    return result
