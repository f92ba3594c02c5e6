# src/holisatis/store.py
"""
Store de documentos de configuração do Satis.

Este módulo é o único ponto de I/O do pacote: lê e grava o documento
em disco e o entrega ao modelo (`SatisFile`) já como dicionário.

Formatos suportados:
    - JSON (.json), formato nativo do Satis
    - YAML (.yaml, .yml)

Decisões arquiteturais:
    - O carregamento pelo store é estrito: arquivo ausente, extensão
      desconhecida ou raiz não-objeto levantam exceções tipadas
      (a leniência para texto malformado existe apenas no construtor
      do `SatisFile`)
    - A gravação retorna o hash canônico do documento gravado

Limites explícitos:
    - Não há locking nem acesso concorrente
    - Não valida semântica do documento
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # PyYAML

from holisatis.core.errors import (
    DocumentNotFoundError,
    InvalidDocumentRootTypeError,
    UnsupportedDocumentFormatError,
)
from holisatis.core.hashing import compute_document_hash
from holisatis.satis_file import SatisFile

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


class DocumentStore:
    """Leitura e gravação de um documento de configuração em `path`."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _format(self) -> str:
        suffix = self.path.suffix.lower()
        if suffix in _JSON_SUFFIXES:
            return "json"
        if suffix in _YAML_SUFFIXES:
            return "yaml"
        raise UnsupportedDocumentFormatError(f"Formato não suportado: {self.path.suffix}")

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> str:
        if not self.path.exists():
            raise DocumentNotFoundError(f"Documento não encontrado: {self.path}")
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")

    def load(self) -> Dict[str, Any]:
        """
        Carrega o documento como dicionário.

        Arquivos vazios são interpretados como dicionários vazios.

        Raises:
            UnsupportedDocumentFormatError: Se a extensão não for suportada.
            DocumentNotFoundError: Se o arquivo não existir.
            InvalidDocumentRootTypeError: Se a raiz não for um objeto.
        """
        fmt = self._format()
        text = self.read()

        if fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise InvalidDocumentRootTypeError(
                f"Raiz do documento deve ser objeto, recebido: {type(data).__name__}"
            )

        return data

    def save(self, document: Dict[str, Any]) -> str:
        """Grava `document` no formato do arquivo e retorna seu hash canônico."""
        fmt = self._format()

        if fmt == "yaml":
            text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(document, indent=4, ensure_ascii=False) + "\n"

        self.write(text)
        return compute_document_hash(document)


def load_satis_file(path: Union[str, Path], homepage: str) -> SatisFile:
    """Abre `path` como `SatisFile`; arquivo ausente produz a configuração padrão."""
    store = DocumentStore(path)
    if not store.exists():
        return SatisFile(homepage)
    return SatisFile(homepage, store.load())


def save_satis_file(satis_file: SatisFile, path: Union[str, Path]) -> str:
    return DocumentStore(path).save(satis_file.as_dict())
