"""Read-only access to the assets emitted by a build."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Union

from .errors import AssetNotFoundError, InlineSvgError
from .util_fs import iter_files

AssetSource = Union[bytes, str]


def _candidate_keys(ref: str, base: str = "") -> List[str]:
    keys = [ref]
    stripped = ref
    while stripped.startswith("./"):
        stripped = stripped[2:]
    stripped = stripped.lstrip("/")
    if stripped and stripped != ref:
        keys.append(stripped)
    if base and not ref.startswith("/"):
        joined = posixpath.normpath(posixpath.join(base, ref))
        if not joined.startswith("..") and joined not in keys:
            keys.append(joined)
    return keys


def lookup_asset(assets: Mapping[str, Any], ref: str, *, base: str = "") -> Any:
    """Return the stored value for ``ref``.

    The exact key wins, then ``ref`` without a leading ``./`` or ``/``, then
    ``ref`` resolved against ``base``, the directory of the referencing
    document.
    """

    for key in _candidate_keys(ref, base):
        if key in assets:
            return assets[key]
    raise AssetNotFoundError(ref)


def asset_text(source: AssetSource, ref: str) -> str:
    """Decode an asset as UTF-8, dropping a byte order mark."""

    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InlineSvgError(f"asset {ref} is not valid UTF-8: {exc.reason}") from exc
    return str(source).removeprefix("\ufeff")


class AssetStore(Mapping[str, AssetSource]):
    """Assets keyed by their POSIX output path, e.g. ``images/logo.svg``."""

    def __init__(self, assets: Mapping[str, AssetSource] | None = None) -> None:
        self._assets: Dict[str, AssetSource] = dict(assets or {})

    def __getitem__(self, key: str) -> AssetSource:
        return self._assets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    @classmethod
    def from_directory(cls, root: Path, *, pattern: str = "**/*.svg") -> "AssetStore":
        """Load every file under ``root`` matching ``pattern``."""

        if not root.exists():
            raise FileNotFoundError(f"Asset directory not found: {root}")

        assets: Dict[str, AssetSource] = {}
        for path in iter_files(root, pattern):
            assets[path.relative_to(root).as_posix()] = path.read_bytes()
        return cls(assets)


__all__ = ["AssetSource", "AssetStore", "asset_text", "lookup_asset"]
