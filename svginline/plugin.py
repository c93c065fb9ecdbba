"""Build pipeline hook that inlines SVG placeholders in generated documents."""

from __future__ import annotations

import logging
import posixpath
from typing import Any, Mapping, Optional

from .engine import inline_svgs
from .errors import InlineSvgError
from .models import HtmlDocument, InlineSvgOptions
from .optimizer import SvgOptimizer, optimize_svg

logger = logging.getLogger(__name__)


class InlineSvgPlugin:
    """Inline ``<img inline src="*.svg">`` placeholders once per generated document.

    Everything a call needs is passed to ``process_document``; nothing from
    one document is kept on the instance for the next.
    """

    def __init__(
        self,
        options: Optional[InlineSvgOptions] = None,
        *,
        optimizer: SvgOptimizer = optimize_svg,
    ) -> None:
        self.options = options or InlineSvgOptions()
        self.optimizer = optimizer

    async def process_document(
        self,
        document: HtmlDocument,
        assets: Mapping[str, Any],
        *,
        output_path: Optional[str] = None,
        svgo_config: Optional[Mapping[str, Any]] = None,
    ) -> HtmlDocument:
        """Return ``document`` with its placeholders inlined.

        Missing build metadata skips processing and passes the document
        through unchanged. Resolver and optimizer failures propagate.
        """

        if not (output_path or self.options.output_path):
            logger.error("no output path found for %s", document.output_name or "<unnamed document>")
            return document

        if not document.output_name:
            logger.error("no filename found on document output_name")
            return document

        config = svgo_config if isinstance(svgo_config, Mapping) else self.options.svgo_config
        try:
            html = await inline_svgs(
                document.html,
                assets,
                config=config,
                optimizer=self.optimizer,
                base_dir=posixpath.dirname(document.output_name),
            )
        except InlineSvgError as exc:
            logger.error("processing %s hit error: %s", document.output_name, exc)
            raise

        if html is document.html:
            return document
        return document.model_copy(update={"html": html})


__all__ = ["InlineSvgPlugin"]
