# src/holisatis/core/defaults.py
"""
Valores padrão e chaves canônicas do documento de configuração do Satis.

Não há configuração por ambiente: os defaults são constantes explícitas
combinadas com documentos importados via `deep_merge`.
"""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_NAME = "default name"
DEFAULT_ARCHIVE_DIRECTORY = "dist"

KEY_NAME = "name"
KEY_HOMEPAGE = "homepage"
KEY_REPOSITORIES = "repositories"
KEY_REQUIRE_ALL = "require-all"
KEY_OUTPUT_HTML = "output-html"
KEY_TWIG_TEMPLATE = "twig-template"
KEY_ARCHIVE = "archive"

# Chaves cujo valor é reconstruído a cada export
MANAGED_KEYS = (
    KEY_NAME,
    KEY_HOMEPAGE,
    KEY_REPOSITORIES,
    KEY_REQUIRE_ALL,
    KEY_OUTPUT_HTML,
    KEY_TWIG_TEMPLATE,
    KEY_ARCHIVE,
)


def normalize_homepage(homepage: str) -> str:
    """Remove uma única barra final da URL base."""
    if homepage.endswith("/"):
        return homepage[:-1]
    return homepage


def default_document(homepage: str) -> Dict[str, Any]:
    """Documento base; `homepage` deve chegar já normalizada."""
    return {
        KEY_NAME: DEFAULT_NAME,
        KEY_HOMEPAGE: homepage,
        KEY_REPOSITORIES: [],
        KEY_REQUIRE_ALL: True,
    }
