"""Verify that generated documents no longer carry inline SVG placeholders."""

from __future__ import annotations

from pathlib import Path
from typing import List

from bs4 import BeautifulSoup, Tag

from .placeholders import IMAGE_TAG, MARKER_ATTRIBUTE, SOURCE_ATTRIBUTE, SVG_REFERENCE
from .util_fs import iter_files, read_text


def _is_placeholder(tag: Tag) -> bool:
    src = tag.get(SOURCE_ATTRIBUTE) or ""
    return tag.has_attr(MARKER_ATTRIBUTE) and SVG_REFERENCE in src


def remaining_placeholders(html: str) -> List[str]:
    """Return the sources of placeholders still present in ``html``."""

    soup = BeautifulSoup(html, "html.parser")
    return [tag[SOURCE_ATTRIBUTE] for tag in soup.find_all(IMAGE_TAG) if _is_placeholder(tag)]


def count_svg_roots(html: str) -> int:
    """Count ``<svg>`` elements that are not nested inside another ``<svg>``."""

    soup = BeautifulSoup(html, "html.parser")
    return sum(1 for tag in soup.find_all("svg") if tag.find_parent("svg") is None)


def verify_site(root: Path, include: str = "**/*.html") -> List[str]:
    errors: List[str] = []
    if not root.exists():
        return [f"Output directory not found: {root}"]

    for path in iter_files(root, include):
        rel = path.relative_to(root).as_posix()
        for src in remaining_placeholders(read_text(path)):
            errors.append(f"Placeholder not inlined in {rel}: {src}")
    return errors


__all__ = ["count_svg_roots", "remaining_placeholders", "verify_site"]
