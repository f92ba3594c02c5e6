# src/holisatis/options/__init__.py
"""Grupos de opções exportados como fragmentos do documento."""

from .archive import ArchiveOptions
from .web import WebOutputOptions

__all__ = ["ArchiveOptions", "WebOutputOptions"]
