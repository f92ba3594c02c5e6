# src/holisatis/repositories.py
"""
Variantes de repositório de origem e normalização para descritores.

Uma fonte de pacotes chega ao modelo de configuração como uma das três
variantes da união `Repository`:

    - ComposerRepository → {"type": "composer", "url": <url base canônica>}
    - VcsRepository      → {"type": <tipo vcs>,  "url": <url vcs>}
    - ArtifactRepository → {"type": "artifact", "url": <caminho de lookup>}

Decisões arquiteturais:
    - O despacho por tipo é exaustivo e termina em falha explícita
    - As variantes validam seus dados na construção
    - A normalização não acessa rede nem filesystem

Limites explícitos:
    - Não busca metadados de pacotes
    - Não resolve credenciais ou opções de transporte
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from holisatis.core.errors import InvalidRepositoryError, UnsupportedRepositoryTypeError

COMPOSER_TYPE = "composer"
ARTIFACT_TYPE = "artifact"

VCS_TYPES = frozenset(
    {
        "vcs",
        "git",
        "git-bitbucket",
        "github",
        "gitlab",
        "hg",
        "hg-bitbucket",
        "svn",
        "fossil",
        "perforce",
    }
)

_PACKAGES_JSON = "/packages.json"


def _require_url(url: str, kind: str) -> None:
    if not isinstance(url, str) or not url.strip():
        raise InvalidRepositoryError(f"Repositório {kind} exige url não vazia")


@dataclass(frozen=True)
class ComposerRepository:
    """Repositório remoto no formato de registry Composer."""

    url: str

    def __post_init__(self) -> None:
        _require_url(self.url, COMPOSER_TYPE)

    @property
    def base_url(self) -> str:
        """URL base canônica, sem `/packages.json` e sem barra final."""
        url = self.url.rstrip("/")
        if url.endswith(_PACKAGES_JSON):
            url = url[: -len(_PACKAGES_JSON)]
        return url.rstrip("/")


@dataclass(frozen=True)
class VcsRepository:
    """Repositório de controle de versão (git, hg, svn, ...)."""

    type: str
    url: str

    def __post_init__(self) -> None:
        if self.type not in VCS_TYPES:
            raise InvalidRepositoryError(
                f"Tipo vcs desconhecido: {self.type!r} (suportados: {sorted(VCS_TYPES)})"
            )
        _require_url(self.url, self.type)


@dataclass(frozen=True)
class ArtifactRepository:
    """Diretório local de artefatos (zip) usado como fonte de pacotes."""

    lookup: str

    def __post_init__(self) -> None:
        _require_url(self.lookup, ARTIFACT_TYPE)


Repository = Union[ComposerRepository, VcsRepository, ArtifactRepository]


def normalize_repository(repository: Any) -> Dict[str, str]:
    """
    Converte uma variante de repositório no descritor mínimo `{type, url}`.

    Args:
        repository (Repository): Variante fornecida pela fonte de repositórios.

    Returns:
        Dict[str, str]: Descritor com as chaves `type` e `url`, nesta ordem.

    Raises:
        UnsupportedRepositoryTypeError: Se o objeto não pertencer à união.
    """
    if isinstance(repository, ComposerRepository):
        return {"type": COMPOSER_TYPE, "url": repository.base_url}
    if isinstance(repository, VcsRepository):
        return {"type": repository.type, "url": repository.url}
    if isinstance(repository, ArtifactRepository):
        return {"type": ARTIFACT_TYPE, "url": repository.lookup}

    raise UnsupportedRepositoryTypeError(
        f"Tipo de repositório não suportado: {type(repository).__name__}"
    )


def repository_from_descriptor(descriptor: Mapping[str, Any]) -> Repository:
    """
    Reconstrói a variante correspondente a um descritor `{type, url}`.

    Raises:
        UnsupportedRepositoryTypeError: Se `type` não corresponder a nenhuma variante.
        InvalidRepositoryError: Se a url estiver ausente ou vazia.
    """
    kind = descriptor.get("type")
    url = descriptor.get("url", "")

    if kind == COMPOSER_TYPE:
        return ComposerRepository(url)
    if kind == ARTIFACT_TYPE:
        return ArtifactRepository(url)
    if isinstance(kind, str) and kind in VCS_TYPES:
        return VcsRepository(kind, url)

    raise UnsupportedRepositoryTypeError(f"Tipo de repositório não suportado: {kind!r}")
