"""Default SVG optimizer and configuration merging.

The optimizer is a set of text passes keyed by name. A pass runs when its
config value is truthy; keys the optimizer does not know are ignored so that
configuration written for other optimizers passes through untouched.
"""

from __future__ import annotations

import re
from typing import Any, Awaitable, Callable, Dict, Mapping, Union

from .attributes import SVG_ROOT_RE
from .errors import OptimizerError

SvgOptimizer = Callable[[str, Dict[str, Any]], Union[str, Awaitable[str]]]

DEFAULT_CONFIG: Mapping[str, Any] = {
    "removeXMLProcInst": True,
    "removeDoctype": True,
    "removeComments": True,
    "removeMetadata": True,
    "removeTitle": False,
    "removeDesc": True,
    "removeEmptyAttrs": True,
    "collapseWhitespace": True,
}

XML_PROC_INST_RE = re.compile(r"<\?xml\b.*?\?>\s*", re.DOTALL)
DOCTYPE_RE = re.compile(r"<!DOCTYPE\b[^\[>]*(\[.*?\])?\s*>\s*", re.DOTALL | re.IGNORECASE)
COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL)
TAG_RE = re.compile(r"<[A-Za-z][^>]*>")
EMPTY_ATTR_RE = re.compile(r"\s+[A-Za-z_:][-\w:.]*\s*=\s*(?:\"\"|'')")
WHITESPACE_BETWEEN_TAGS_RE = re.compile(r">\s+<")
TEXT_CONTENT_RE = re.compile(r"<text\b.*?</text\s*>", re.DOTALL)

LICENSE_KEEP_WORDS = ("copyright", "license", "licence")


def _element_re(name: str) -> re.Pattern[str]:
    return re.compile(
        rf"<{name}\b[^>]*/>|<{name}\b[^>]*>.*?</{name}\s*>",
        re.DOTALL,
    )


METADATA_RE = _element_re("metadata")
TITLE_RE = _element_re("title")
DESC_RE = _element_re("desc")


def merge_config(user_config: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """Overlay ``user_config`` on the defaults; user keys win."""

    merged = dict(DEFAULT_CONFIG)
    if user_config:
        merged.update(user_config)
    return merged


def _remove_comments(text: str) -> str:
    def keep_or_drop(match: re.Match[str]) -> str:
        body = match.group(1)
        if body.startswith("!") or any(word in body.lower() for word in LICENSE_KEEP_WORDS):
            return match.group(0)
        return ""

    return COMMENT_RE.sub(keep_or_drop, text)


def _remove_empty_attrs(text: str) -> str:
    return TAG_RE.sub(lambda match: EMPTY_ATTR_RE.sub("", match.group(0)), text)


def _collapse_whitespace(text: str) -> str:
    # whitespace inside <text> renders
    protected = [match.span() for match in TEXT_CONTENT_RE.finditer(text)]

    def collapse(match: re.Match[str]) -> str:
        if any(start <= match.start() and match.end() <= end for start, end in protected):
            return match.group(0)
        return "><"

    return WHITESPACE_BETWEEN_TAGS_RE.sub(collapse, text).strip()


PASSES = (
    ("removeXMLProcInst", lambda text: XML_PROC_INST_RE.sub("", text)),
    ("removeDoctype", lambda text: DOCTYPE_RE.sub("", text)),
    ("removeComments", _remove_comments),
    ("removeMetadata", lambda text: METADATA_RE.sub("", text)),
    ("removeTitle", lambda text: TITLE_RE.sub("", text)),
    ("removeDesc", lambda text: DESC_RE.sub("", text)),
    ("removeEmptyAttrs", _remove_empty_attrs),
    ("collapseWhitespace", _collapse_whitespace),
)


def optimize_svg(svg_text: str, config: Mapping[str, Any]) -> str:
    """Return an optimized copy of ``svg_text`` using the enabled passes."""

    if SVG_ROOT_RE.search(svg_text) is None:
        raise OptimizerError("no <svg> root element found")

    text = svg_text
    for name, apply in PASSES:
        if config.get(name):
            text = apply(text)
    return text


__all__ = ["DEFAULT_CONFIG", "PASSES", "SvgOptimizer", "merge_config", "optimize_svg"]
