"""Loading of svginline.yaml."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import InlineSvgConfig

DEFAULT_CONFIG_PATH = Path("svginline.yaml")


def load_config(path: Path | None = None) -> InlineSvgConfig:
    """Load and validate the config file; a missing file yields the defaults."""

    path = path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return InlineSvgConfig()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping.")
    try:
        return InlineSvgConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid config in {path}: {exc}") from exc


__all__ = ["DEFAULT_CONFIG_PATH", "load_config"]
