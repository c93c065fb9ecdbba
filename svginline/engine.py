"""Replace inline SVG placeholders with optimized SVG markup.

Each splice changes the length of the document, so offsets computed before a
splice are meaningless after it. The engine therefore handles one placeholder
per step: parse the current string, take the first placeholder, splice it,
and start over with the new string.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .assets import asset_text, lookup_asset
from .attributes import spread_attributes
from .errors import InlineSvgError, OptimizerError
from .fragment import ParsedNode, parse_fragment
from .optimizer import SvgOptimizer, merge_config, optimize_svg
from .placeholders import find_placeholders, first_placeholder, get_image_src

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplacementResult:
    html: str
    replaced: bool


async def _settle(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def splice(markup: str, node: ParsedNode, replacement: str) -> str:
    """Replace the exact range ``node`` occupies in ``markup``.

    ``node`` must come from parsing this very ``markup`` string.
    """

    return markup[: node.start] + replacement + markup[node.end :]


async def replace_first_placeholder(
    markup: str,
    assets: Mapping[str, Any],
    *,
    config: Mapping[str, Any] | None = None,
    optimizer: SvgOptimizer = optimize_svg,
    base_dir: str = "",
) -> ReplacementResult:
    """Inline the first placeholder of ``markup``, if there is one.

    ``base_dir`` is the POSIX directory of the document within the build
    output; document-relative sources are resolved against it.
    """

    tree = parse_fragment(markup)
    placeholder = first_placeholder(tree)
    if placeholder is None:
        return ReplacementResult(html=markup, replaced=False)

    src = get_image_src(placeholder)
    svg_text = asset_text(await _settle(lookup_asset(assets, src, base=base_dir)), src)

    try:
        optimized = await _settle(optimizer(svg_text, merge_config(config)))
    except Exception as exc:
        logger.error("Optimizing %s failed: %s", src, exc)
        message = exc.message if isinstance(exc, OptimizerError) else str(exc)
        raise OptimizerError(message, path=src) from exc

    svg_markup = spread_attributes(placeholder.attrs, optimized)
    logger.debug("Inlined %s over [%d, %d)", src, placeholder.start, placeholder.end)
    return ReplacementResult(html=splice(markup, placeholder, svg_markup), replaced=True)


async def inline_svgs(
    markup: str,
    assets: Mapping[str, Any],
    *,
    config: Mapping[str, Any] | None = None,
    optimizer: SvgOptimizer = optimize_svg,
    base_dir: str = "",
) -> str:
    """Return ``markup`` with every placeholder replaced by its inlined SVG.

    Placeholders are processed strictly in document order. Any failure aborts
    the whole document; a partially inlined document is never returned.
    """

    expected = len(find_placeholders(parse_fragment(markup)))
    if not expected:
        return markup

    html = markup
    for _ in range(expected):
        result = await replace_first_placeholder(
            html, assets, config=config, optimizer=optimizer, base_dir=base_dir
        )
        html = result.html
        if not result.replaced:
            return html

    leftover = find_placeholders(parse_fragment(html))
    if leftover:
        raise InlineSvgError(
            f"{len(leftover)} placeholder(s) remain after inlining {expected}; "
            "an inlined SVG contains its own inline placeholders"
        )

    logger.info("Inlined %d SVG placeholder(s)", expected)
    return html


def inline_svgs_sync(
    markup: str,
    assets: Mapping[str, Any],
    *,
    config: Mapping[str, Any] | None = None,
    optimizer: SvgOptimizer = optimize_svg,
    base_dir: str = "",
) -> str:
    return asyncio.run(
        inline_svgs(markup, assets, config=config, optimizer=optimizer, base_dir=base_dir)
    )


__all__ = [
    "ReplacementResult",
    "inline_svgs",
    "inline_svgs_sync",
    "replace_first_placeholder",
    "splice",
]
