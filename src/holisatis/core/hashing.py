# src/holisatis/core/hashing.py
"""
Hashing de identidade de repositórios e de documentos.

Este módulo implementa duas identidades determinísticas:

    - identidade de repositório: digest curto (MD5, 128 bits) dos valores
      de um descritor `{type, url}`, unidos em ordem fixa com separador.
      Usado apenas para detecção de duplicatas.
    - hash de documento: SHA-256 do JSON canônico de um documento inteiro.
      Usado para rastrear o que foi gravado pelo store.

Decisões arquiteturais:
    - A identidade de repositório não é fronteira de segurança
      (`usedforsecurity=False`)
    - A ordem dos campos é fixa (type, url) e independe da ordem das chaves
      do descritor recebido

Invariantes:
    - A mesma entrada sempre produz o mesmo hash
    - Nenhuma mutação ocorre sobre o input

Limites explícitos:
    - Não normaliza descritores (responsabilidade de `repositories`)
    - Não persiste hashes
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Mapping

IDENTITY_FIELDS = ("type", "url")

# type e url nunca contêm NUL
IDENTITY_SEPARATOR = "\0"


def compute_repository_identity(descriptor: Mapping[str, Any]) -> str:
    """
    Gera o token de identidade de um descritor de repositório normalizado.

    Os valores de `type` e `url` são unidos nesta ordem, separados por NUL,
    e o digest MD5 hexadecimal do resultado é retornado.

    Args:
        descriptor (Mapping[str, Any]): Descritor contendo `type` e `url`.

    Returns:
        str: Digest hexadecimal de 32 caracteres.

    Raises:
        KeyError: Se `type` ou `url` estiverem ausentes.
    """
    joined = IDENTITY_SEPARATOR.join(str(descriptor[key]) for key in IDENTITY_FIELDS)
    return hashlib.md5(joined.encode("utf-8"), usedforsecurity=False).hexdigest()


def compute_document_hash(document: Dict[str, Any]) -> str:
    """
    Impressão digital de um documento Satis exportado.

    Dois documentos com o mesmo conteúdo têm a mesma impressão digital,
    mesmo que as chaves estejam em outra ordem. O store a retorna
    depois de gravar, para que quem grava saiba se o arquivo mudou
    entre duas gravações.

    O conteúdo é serializado como JSON com chaves ordenadas, sem espaços
    e em UTF-8, e resumido com SHA-256.

    Args:
        document (Dict[str, Any]): Documento como retornado por `SatisFile.as_dict()`.

    Returns:
        str: 64 caracteres hexadecimais.

    Raises:
        TypeError: Se `document` não for um dicionário.
    """
    if not isinstance(document, dict):
        raise TypeError(
            f"Documento para hashing deve ser dict, recebido: {type(document).__name__}"
        )

    serialized = json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()
