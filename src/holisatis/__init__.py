# src/holisatis/__init__.py
"""
holisatis: modelo do arquivo de configuração de um repositório Satis.

Este pacote mantém a lista canônica e deduplicada de repositórios de
origem de um repositório Composer estático, junto com as opções de saída
HTML e de arquivos dist, e converte esse estado de/para o documento JSON
do Satis.

Arquitetura em alto nível:
    - core.hashing     → identidade de repositórios e hash de documentos
    - core.merge       → deep-merge determinístico de opções
    - repositories     → variantes de repositório e normalização
    - options          → opções de saída HTML e de archive
    - satis_file       → modelo de configuração (orquestrador)
    - store            → leitura e gravação do documento em disco

Limites explícitos:
    - Não acessa rede nem resolve dependências
    - Não renderiza HTML nem gera arquivos dist
"""

from .core.errors import SatisConfigError, UnsupportedRepositoryTypeError
from .repositories import (
    ArtifactRepository,
    ComposerRepository,
    VcsRepository,
    normalize_repository,
    repository_from_descriptor,
)
from .satis_file import SatisFile

__all__ = [
    "SatisFile",
    "ComposerRepository",
    "VcsRepository",
    "ArtifactRepository",
    "normalize_repository",
    "repository_from_descriptor",
    "SatisConfigError",
    "UnsupportedRepositoryTypeError",
]
