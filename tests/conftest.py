# tests/conftest.py
"""
Fixtures compartilhados para testes do holisatis.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos de configuração Satis mínimos e determinísticos
- variantes de repositório prontas para uso

Decisões arquiteturais:
    - Documentos são fornecidos como string/dict para evitar I/O
    - Imports do pacote são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Dados retornados são determinísticos e isolados
"""

import pytest


@pytest.fixture
def homepage() -> str:
    return "http://example.org/"


@pytest.fixture
def existing_satis_json() -> str:
    """
    Documento Satis existente, semelhante a um `satis.json` real.

    Contém:
    - dois repositórios (vcs e composer)
    - template twig explícito (saída HTML habilitada)
    - bloco archive com campos além de `directory`
    - chave não gerenciada (`require`) que deve sobreviver ao round-trip

    Returns:
        str: Conteúdo JSON do documento.
    """

    return """\
{
    "name": "Acme packages",
    "homepage": "https://packages.acme.test",
    "repositories": [
        {"type": "git", "url": "https://github.com/acme/tools.git"},
        {"type": "composer", "url": "https://repo.packagist.org"}
    ],
    "require-all": false,
    "require": {"acme/tools": "^1.0"},
    "twig-template": "views/index.html.twig",
    "archive": {"directory": "dist", "format": "tar", "skip-dev": true}
}
"""


@pytest.fixture
def git_repository():
    from holisatis.repositories import VcsRepository

    return VcsRepository("git", "https://github.com/acme/tools.git")


@pytest.fixture
def composer_repository():
    from holisatis.repositories import ComposerRepository

    return ComposerRepository("https://repo.packagist.org/packages.json")


@pytest.fixture
def artifact_repository():
    from holisatis.repositories import ArtifactRepository

    return ArtifactRepository("/srv/artifacts")
