"""Repository layer for board persistence."""

from .json_file import JsonRepository
from .markdown import MarkdownRepository
from .protocol import RepositoryProtocol

__all__ = [
    "JsonRepository",
    "MarkdownRepository",
    "RepositoryProtocol",
]
