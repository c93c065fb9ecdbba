"""Filesystem utilities for svginline.

Documents are read and written without newline translation so that every
character outside a placeholder survives a rewrite unchanged.
"""

from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


def iter_files(root: Path, pattern: str) -> List[Path]:
    """Return files under ``root`` matching ``pattern`` in a stable order."""

    return [path for path in sorted(root.glob(pattern)) if path.is_file()]


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    return Path(path).read_bytes().decode(encoding)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(content.encode(encoding))
    return file_path


__all__ = ["iter_files", "read_text", "write_text"]
