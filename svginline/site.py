"""Inline SVG placeholders across every document of a build output directory."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .assets import AssetStore
from .models import HtmlDocument, InlineSvgOptions
from .optimizer import SvgOptimizer, optimize_svg
from .plugin import InlineSvgPlugin
from .util_fs import iter_files, read_text, write_text

logger = logging.getLogger(__name__)


@dataclass
class SiteContext:
    """Where the build output lives and how to process it."""

    out_root: Path
    include: str = "**/*.html"
    assets: str = "**/*.svg"
    svgo_config: Dict[str, Any] = field(default_factory=dict)
    optimizer: SvgOptimizer = optimize_svg

    def document_paths(self) -> List[Path]:
        return iter_files(self.out_root, self.include)

    def plugin(self) -> InlineSvgPlugin:
        options = InlineSvgOptions(output_path=str(self.out_root), svgo_config=self.svgo_config)
        return InlineSvgPlugin(options, optimizer=self.optimizer)


async def _render_site(ctx: SiteContext) -> List[Tuple[Path, HtmlDocument, HtmlDocument]]:
    if not ctx.out_root.exists():
        raise FileNotFoundError(f"Output directory not found: {ctx.out_root}")

    store = AssetStore.from_directory(ctx.out_root, pattern=ctx.assets)
    plugin = ctx.plugin()
    paths = ctx.document_paths()
    documents = [
        HtmlDocument(output_name=path.relative_to(ctx.out_root).as_posix(), html=read_text(path))
        for path in paths
    ]
    logger.info("Processing %d document(s) against %d asset(s)", len(documents), len(store))

    results = await asyncio.gather(*(plugin.process_document(doc, store) for doc in documents))
    return list(zip(paths, documents, results))


async def inline_site(ctx: SiteContext) -> List[Path]:
    """Rewrite documents in place; nothing is written unless every document succeeded."""

    written: List[Path] = []
    for path, before, after in await _render_site(ctx):
        if after.html != before.html:
            written.append(write_text(path, after.html))
    return written


async def check_site(ctx: SiteContext) -> List[str]:
    """Return the output names of documents that inlining would change."""

    return [
        before.output_name
        for _, before, after in await _render_site(ctx)
        if after.html != before.html
    ]


__all__ = ["SiteContext", "check_site", "inline_site"]
