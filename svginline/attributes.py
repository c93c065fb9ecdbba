"""Carry placeholder attributes over to the root of the inlined SVG."""

from __future__ import annotations

import html
import logging
import re
from typing import Iterable, List

from .fragment import Attribute
from .placeholders import RESERVED_ATTRIBUTES

logger = logging.getLogger(__name__)

SVG_ROOT_RE = re.compile(r"<svg(?=[\s/>])")


def _render_attr(name: str, value: str | None) -> str:
    if not value:
        return name
    return f'{name}="{html.escape(value, quote=True)}"'


def spread_attributes(attrs: Iterable[Attribute], svg_markup: str) -> str:
    """Insert non-reserved ``attrs`` right after the root ``<svg`` token.

    Bare or empty attributes are written without a value. Values were decoded
    by the parser, so they are escaped again on the way out.
    """

    copied: List[str] = [
        _render_attr(name, value) for name, value in attrs if name not in RESERVED_ATTRIBUTES
    ]
    if not copied:
        return svg_markup

    match = SVG_ROOT_RE.search(svg_markup)
    if match is None:
        logger.warning("No <svg> root found; %d attribute(s) dropped", len(copied))
        return svg_markup

    insert_at = match.end()
    return svg_markup[:insert_at] + " " + " ".join(copied) + svg_markup[insert_at:]


__all__ = ["SVG_ROOT_RE", "spread_attributes"]
