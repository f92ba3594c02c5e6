# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do holisatis.

Garantem apenas que o pacote pode ser importado e que o namespace
público expõe o modelo e as variantes de repositório.

Limites explícitos:
    - Não testar lógica de negócio
    - Não acumular asserts funcionais
"""


def test_smoke():
    import holisatis

    assert holisatis.SatisFile is not None
    assert set(holisatis.__all__) >= {
        "SatisFile",
        "ComposerRepository",
        "VcsRepository",
        "ArtifactRepository",
        "normalize_repository",
        "repository_from_descriptor",
    }
