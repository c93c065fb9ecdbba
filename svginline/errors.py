"""Exceptions raised while inlining SVG placeholders."""

from __future__ import annotations


class InlineSvgError(Exception):
    """Base class for failures that abort processing of a document."""


class AssetNotFoundError(InlineSvgError, KeyError):
    """A placeholder references a path that was not emitted by the build."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"no such asset {self.path}"


class OptimizerError(InlineSvgError):
    """The SVG optimizer rejected or failed on an asset."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"failed to optimize {self.path}: {self.message}"
        return self.message


__all__ = ["AssetNotFoundError", "InlineSvgError", "OptimizerError"]
