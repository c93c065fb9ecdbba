"""Discovery of ``<img inline src="*.svg">`` placeholders in a parsed fragment."""

from __future__ import annotations

from typing import List, Optional

from .fragment import ParsedNode

IMAGE_TAG = "img"
MARKER_ATTRIBUTE = "inline"
SOURCE_ATTRIBUTE = "src"
RESERVED_ATTRIBUTES = frozenset({MARKER_ATTRIBUTE, SOURCE_ATTRIBUTE})
SVG_REFERENCE = ".svg"


def get_image_src(node: ParsedNode) -> str:
    """Return the placeholder's source path, or ``""`` if it does not reference an SVG.

    Only a substring check is made, so ``icons/a.svg?v=2`` qualifies.
    """

    src = node.get_attr(SOURCE_ATTRIBUTE) or ""
    return src if SVG_REFERENCE in src else ""


def is_inline_placeholder(node: ParsedNode) -> bool:
    return (
        node.tag == IMAGE_TAG
        and node.has_attr(MARKER_ATTRIBUTE)
        and bool(get_image_src(node))
    )


def find_placeholders(tree: ParsedNode) -> List[ParsedNode]:
    """Return every placeholder below ``tree`` in document order."""

    return [node for node in tree.iter() if node is not tree and is_inline_placeholder(node)]


def first_placeholder(tree: ParsedNode) -> Optional[ParsedNode]:
    for node in tree.iter():
        if node is not tree and is_inline_placeholder(node):
            return node
    return None


__all__ = [
    "IMAGE_TAG",
    "MARKER_ATTRIBUTE",
    "RESERVED_ATTRIBUTES",
    "SOURCE_ATTRIBUTE",
    "SVG_REFERENCE",
    "find_placeholders",
    "first_placeholder",
    "get_image_src",
    "is_inline_placeholder",
]
