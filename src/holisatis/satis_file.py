# src/holisatis/satis_file.py
"""
Modelo em memória do arquivo de configuração do Satis.

O `SatisFile` é o dono exclusivo de:
    - nome e homepage do repositório estático
    - lista ordenada e deduplicada de repositórios de origem
    - opções de saída HTML (`WebOutputOptions`)
    - opções de arquivos dist (`ArchiveOptions`)
    - chaves não gerenciadas de um documento importado (preservadas)

Princípios fundamentais:
    - A ordem da lista de repositórios define precedência e só muda
      por remoção explícita
    - Mesma url com tipo diferente é atualização no lugar, nunca inserção
    - Reaplicar um repositório idêntico é no-op silencioso
    - O documento exportado é recomposto a cada chamada (`as_dict`)

Invariantes:
    - A identidade de cada entrada é derivada de (type, url) no momento
      da consulta; não existe índice paralelo a manter em sincronia
    - Uma variante de repositório não suportada não altera o estado

Limites explícitos:
    - Não lê nem grava arquivos (ver `holisatis.store`)
    - Não acessa rede
    - Não é seguro para mutação concorrente
"""

from __future__ import annotations

import json
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from holisatis.core.defaults import (
    DEFAULT_ARCHIVE_DIRECTORY,
    DEFAULT_NAME,
    KEY_ARCHIVE,
    KEY_HOMEPAGE,
    KEY_NAME,
    KEY_OUTPUT_HTML,
    KEY_REPOSITORIES,
    KEY_REQUIRE_ALL,
    KEY_TWIG_TEMPLATE,
    MANAGED_KEYS,
    default_document,
    normalize_homepage,
)
from holisatis.core.hashing import compute_repository_identity
from holisatis.options.archive import ArchiveOptions
from holisatis.options.web import WebOutputOptions
from holisatis.repositories import Repository, normalize_repository


@dataclass
class RepositoryEntry:
    """
    Entrada da lista de repositórios.

    `extra` guarda chaves adicionais de entradas importadas
    (ex.: `options`, `only`) para que o export não perca dados.
    `raw` guarda entradas importadas que não são objetos; elas são
    exportadas como estão e nunca casam por url ou identidade.
    """

    type: Optional[str]
    url: Optional[str]
    extra: Dict[str, Any] = field(default_factory=dict)
    raw: Any = None
    is_raw: bool = False

    @property
    def identity(self) -> Optional[str]:
        if self.is_raw:
            return None
        return compute_repository_identity({"type": self.type or "", "url": self.url or ""})

    @classmethod
    def from_value(cls, value: Any) -> "RepositoryEntry":
        if not isinstance(value, Mapping):
            return cls(type=None, url=None, raw=deepcopy(value), is_raw=True)
        extra = {k: deepcopy(v) for k, v in value.items() if k not in ("type", "url")}
        return cls(type=value.get("type"), url=value.get("url"), extra=extra)

    def to_dict(self) -> Any:
        if self.is_raw:
            return deepcopy(self.raw)
        data: Dict[str, Any] = {}
        if self.type is not None:
            data["type"] = self.type
        if self.url is not None:
            data["url"] = self.url
        data.update(deepcopy(self.extra))
        return data


class SatisFile:
    """
    Configuração de um repositório Satis.

    Construção:
        - sem documento existente: defaults (nome padrão, lista vazia,
          `require-all` verdadeiro, HTML desabilitado, archive em `dist`)
        - com documento (mapping ou texto JSON): valores adotados como estão
        - texto JSON inválido: tratado como ausência de documento; um evento
          `warning` é registrado e nenhuma exceção é levantada

    Todos os setters retornam a própria instância (encadeáveis).
    """

    def __init__(
        self,
        homepage: str,
        existing: Union[None, str, bytes, Mapping[str, Any]] = None,
    ) -> None:
        self.events: List[Dict[str, Any]] = []
        self._homepage = normalize_homepage(homepage)
        self._repositories: List[RepositoryEntry] = []
        self._extra: Dict[str, Any] = {}

        document = self._parse_existing(existing)
        if document:
            self._init_from_document(document)
        else:
            self._init_defaults()

    # -----------------------------
    # Construção
    # -----------------------------
    def _parse_existing(
        self, existing: Union[None, str, bytes, Mapping[str, Any]]
    ) -> Optional[Mapping[str, Any]]:
        if existing is None:
            return None

        if isinstance(existing, (bytes, bytearray)):
            try:
                existing = bytes(existing).decode("utf-8")
            except UnicodeDecodeError as e:
                self.log(
                    level="warning",
                    message="Documento existente não é UTF-8; usando configuração padrão",
                    error=str(e),
                )
                return None

        if isinstance(existing, str):
            try:
                parsed = json.loads(existing)
            except (ValueError, RecursionError) as e:
                self.log(
                    level="warning",
                    message="Documento existente inválido; usando configuração padrão",
                    error=str(e),
                )
                return None
            if not isinstance(parsed, dict):
                self.log(
                    level="warning",
                    message="Documento existente não é um objeto; usando configuração padrão",
                    root_type=type(parsed).__name__,
                )
                return None
            return parsed

        if isinstance(existing, Mapping):
            return existing

        raise TypeError(
            f"Documento existente deve ser str, bytes ou mapping, recebido: {type(existing).__name__}"
        )

    def _init_defaults(self) -> None:
        self._name = DEFAULT_NAME
        self._require_all = True
        self._web_options = WebOutputOptions().disable()
        self._archive_options = ArchiveOptions().set({"directory": DEFAULT_ARCHIVE_DIRECTORY})

    def _init_from_document(self, document: Mapping[str, Any]) -> None:
        # valores do documento adotados como estão, sem checagem de tipo
        defaults = default_document(self._homepage)

        self._name = document.get(KEY_NAME, defaults[KEY_NAME])
        self._homepage = document.get(KEY_HOMEPAGE, defaults[KEY_HOMEPAGE])
        self._require_all = document.get(KEY_REQUIRE_ALL, defaults[KEY_REQUIRE_ALL])

        repositories = document.get(KEY_REPOSITORIES)
        if isinstance(repositories, Mapping):
            # forma indexada por nome do Composer
            repositories = list(repositories.values())
        elif not isinstance(repositories, list):
            repositories = []
        self._repositories = [RepositoryEntry.from_value(r) for r in repositories]

        template = document.get(KEY_TWIG_TEMPLATE)
        if isinstance(template, str):
            self._web_options = WebOutputOptions(template)
        else:
            self._web_options = WebOutputOptions.unspecified()
        if document.get(KEY_OUTPUT_HTML) is not None:
            if document[KEY_OUTPUT_HTML]:
                self._web_options.enable()
            else:
                self._web_options.disable()

        self._archive_options = ArchiveOptions()
        if isinstance(document.get(KEY_ARCHIVE), Mapping):
            self._archive_options.set(document[KEY_ARCHIVE])

        self._extra = {k: deepcopy(v) for k, v in document.items() if k not in MANAGED_KEYS}

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    # -----------------------------
    # Repositórios
    # -----------------------------
    def _find_by_url(self, url: str) -> Optional[RepositoryEntry]:
        for entry in self._repositories:
            if entry.url == url:
                return entry
        return None

    def _index_of(self, identity: str) -> Optional[int]:
        for index, entry in enumerate(self._repositories):
            if entry.identity == identity:
                return index
        return None

    def set_repository(self, repository: Repository) -> "SatisFile":
        """
        Insere ou atualiza um repositório.

        - url já presente: apenas o `type` da entrada é atualizado, na mesma posição
        - url nova e identidade inédita: a entrada é adicionada ao final
        - descritor idêntico já presente: nada muda

        Raises:
            UnsupportedRepositoryTypeError: Se a variante não for suportada.
        """
        descriptor = normalize_repository(repository)

        entry = self._find_by_url(descriptor["url"])
        if entry is not None:
            if entry.type != descriptor["type"]:
                previous = entry.type
                entry.type = descriptor["type"]
                self.log(
                    level="info",
                    message="Tipo de repositório alterado",
                    url=entry.url,
                    previous_type=previous,
                    type=entry.type,
                )
            return self

        if self._index_of(compute_repository_identity(descriptor)) is None:
            self._repositories.append(RepositoryEntry(descriptor["type"], descriptor["url"]))
            self.log(level="info", message="Repositório adicionado", **descriptor)

        return self

    def unset_repository(self, repository: Repository) -> "SatisFile":
        """Remove o repositório com descritor idêntico; no-op se ausente."""
        descriptor = normalize_repository(repository)
        index = self._index_of(compute_repository_identity(descriptor))
        if index is not None:
            del self._repositories[index]
            self.log(level="info", message="Repositório removido", index=index, **descriptor)
        return self

    def has_repository(self, repository: Repository) -> bool:
        descriptor = normalize_repository(repository)
        return self._index_of(compute_repository_identity(descriptor)) is not None

    def get_repositories(self) -> List[Any]:
        return [entry.to_dict() for entry in self._repositories]

    def __len__(self) -> int:
        return len(self._repositories)

    # -----------------------------
    # Campos simples
    # -----------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def homepage(self) -> str:
        return self._homepage

    @property
    def require_all(self) -> bool:
        return self._require_all

    def set_name(self, name: str = DEFAULT_NAME) -> "SatisFile":
        self._name = name
        return self

    def set_require_all(self, require_all: bool = True) -> "SatisFile":
        self._require_all = require_all
        return self

    # -----------------------------
    # Opções
    # -----------------------------
    def get_web_options(self) -> WebOutputOptions:
        return self._web_options

    def set_web_options(self, web_options: Mapping[str, Any]) -> "SatisFile":
        """
        Aplica `output-html` e/ou `twig-template`.

        `output-html` falso desabilita antes de o template ser avaliado;
        um template string sempre habilita a saída.
        """
        output_html = web_options.get(KEY_OUTPUT_HTML)
        template = web_options.get(KEY_TWIG_TEMPLATE)

        if output_html is not None:
            if not output_html:
                self._web_options.disable()
            elif not isinstance(template, str):
                self._web_options.enable()

        if isinstance(template, str):
            self._web_options.set(template)

        return self

    def get_archive_options(self) -> Dict[str, Any]:
        return self._archive_options.fields

    def set_archive_options(self, archive_options: Mapping[str, Any]) -> "SatisFile":
        self._archive_options.set(archive_options)
        return self

    def disable_archive_options(self) -> "SatisFile":
        self._archive_options.disable()
        return self

    # -----------------------------
    # Export
    # -----------------------------
    def as_dict(self) -> Dict[str, Any]:
        """Documento completo, com os fragmentos de opções recompostos."""
        document: Dict[str, Any] = {
            KEY_NAME: self._name,
            KEY_HOMEPAGE: self._homepage,
            KEY_REPOSITORIES: self.get_repositories(),
            KEY_REQUIRE_ALL: self._require_all,
        }
        document.update(self._web_options.get())
        document.update(self._archive_options.get())
        document.update(deepcopy(self._extra))
        return document

    def json(self) -> str:
        return json.dumps(self.as_dict(), indent=4, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"SatisFile(name={self._name!r}, homepage={self._homepage!r}, repositories={len(self)})"
