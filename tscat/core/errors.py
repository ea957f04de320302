"""Catalogue loading errors."""

from __future__ import annotations

from pathlib import Path


class CatalogueError(Exception):
    """Base class for everything the catalogue loader raises."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{self.path}: {message}"
        super().__init__(message)


class CatalogueParseError(CatalogueError):
    """The document is not well-formed markup."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message, path)


class CatalogueFormatError(CatalogueError):
    """The markup parses but does not have the TS document structure."""
