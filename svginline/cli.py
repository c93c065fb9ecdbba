"""Command-line interface for svginline."""

import argparse
import asyncio
from pathlib import Path
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG_PATH, load_config
from .errors import InlineSvgError
from .io_utils import configure_logging, warn
from .models import InlineSvgConfig
from .site import SiteContext, check_site, inline_site
from .verify import verify_site


def _site_context(args: argparse.Namespace, config: InlineSvgConfig) -> SiteContext:
    out = args.out or config.output_path
    if not out:
        raise SystemExit("No output directory given; pass --out or set outputPath in the config.")
    return SiteContext(
        out_root=Path(out),
        include=args.include or config.include,
        assets=args.assets or config.assets,
        svgo_config=dict(config.svgo_config),
    )


def _handle_inline(args: argparse.Namespace) -> None:
    config = load_config(Path(args.config))
    ctx = _site_context(args, config)

    try:
        if args.check:
            pending = asyncio.run(check_site(ctx))
            if pending:
                for name in pending:
                    warn(f"Placeholders not inlined: {name}")
                raise SystemExit(1)
            print(f"All documents under {ctx.out_root} are inlined.")
            return
        written = asyncio.run(inline_site(ctx))
    except (InlineSvgError, FileNotFoundError) as exc:
        warn(str(exc))
        raise SystemExit(1) from exc

    print(f"Inlined SVGs into {len(written)} document(s) under {ctx.out_root}.")


def _handle_verify(args: argparse.Namespace) -> None:
    root = Path(args.root)
    errors = verify_site(root, args.include)
    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)
    print(f"Verified inlined SVGs at {root}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svginline",
        description="Inline SVG placeholders in generated HTML.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="svginline 0.1.0",
        help="Show the svginline version and exit.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        help="Logging level for diagnostics written to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    inline_parser = subparsers.add_parser(
        "inline",
        help="Inline SVG placeholders in a build output directory.",
        description="Replace <img inline src=\"*.svg\"> elements with optimized SVG markup.",
    )
    inline_parser.add_argument(
        "--out",
        default=None,
        help="Build output directory holding the HTML documents and SVG assets.",
    )
    inline_parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to svginline.yaml.",
    )
    inline_parser.add_argument(
        "--include",
        default=None,
        help="Glob of documents to process, relative to the output directory.",
    )
    inline_parser.add_argument(
        "--assets",
        default=None,
        help="Glob of assets to load, relative to the output directory.",
    )
    inline_parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write anything; fail if any document still needs inlining.",
    )
    inline_parser.set_defaults(func=_handle_inline)

    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify no placeholders remain.",
        description="Scan generated documents for placeholders that were not inlined.",
    )
    verify_parser.add_argument("--root", required=True, help="Build output directory.")
    verify_parser.add_argument(
        "--include",
        default="**/*.html",
        help="Glob of documents to scan, relative to the root.",
    )
    verify_parser.set_defaults(func=_handle_verify)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
