# tests/core/test_deep_merge.py
"""
Testes da política de deep-merge.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são detectados e rejeitados explicitamente
- objetos de entrada não são mutados durante o merge

Invariantes:
    - Chaves não sobrescritas são preservadas
    - Nenhum merge parcial é produzido em caso de erro
"""

import pytest

try:
    from holisatis.core.merge import deep_merge
    from holisatis.core.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que os módulos de merge estejam disponíveis para os testes.

    Falha explicitamente com uma mensagem orientada quando `deep_merge`
    e/ou `ConfigTypeConflictError` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge modules. Implement:\n"
            "- src/holisatis/core/merge.py (deep_merge)\n"
            "- src/holisatis/core/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """
    Verifica o override de valores escalares sem mutar as entradas.

    Invariantes:
        - O valor sobrescrito reflete exatamente o override
        - `base` e `override` não sofrem mutação
    """
    _require_imports()
    base = {"directory": "dist", "format": "zip"}
    override = {"directory": "build"}
    out = deep_merge(base, override)
    assert out == {"directory": "build", "format": "zip"}
    assert base == {"directory": "dist", "format": "zip"}
    assert override == {"directory": "build"}


def test_merge_nested_dict():
    _require_imports()
    base = {"archive": {"directory": "dist", "skip-dev": False}}
    override = {"archive": {"skip-dev": True}}
    assert deep_merge(base, override) == {"archive": {"directory": "dist", "skip-dev": True}}


def test_merge_list_override_total():
    _require_imports()
    base = {"whitelist": ["acme/a", "acme/b"]}
    override = {"whitelist": ["acme/c"]}
    assert deep_merge(base, override) == {"whitelist": ["acme/c"]}


def test_merge_none_overrides_without_conflict():
    _require_imports()
    assert deep_merge({"prefix-url": "https://x"}, {"prefix-url": None}) == {"prefix-url": None}
    assert deep_merge({"prefix-url": None}, {"prefix-url": "https://x"}) == {"prefix-url": "https://x"}


def test_merge_type_conflict_raises():
    """
    Verifica que conflitos de tipo são rejeitados explicitamente.

    Usado para garantir:
        - Um dicionário não pode ser sobrescrito por um escalar
    """
    _require_imports()
    base = {"archive": {"directory": "dist"}}
    override = {"archive": "dist"}
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)
