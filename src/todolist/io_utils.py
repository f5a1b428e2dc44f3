"""Wrappers for text file I/O with consistent encoding (UTF-8)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

PathLike = Path | str


def read_text(path: PathLike, errors: str = "strict", **kwargs: Any) -> str:
    """Read path as text with UTF-8 encoding. Forwards extra kwargs to Path.read_text."""
    p = path if isinstance(path, Path) else Path(path)
    return p.read_text(encoding="utf-8", errors=errors, **kwargs)


def write_text(path: PathLike, text: str, **kwargs: Any) -> None:
    """Write text to path with UTF-8 encoding.

    Newlines are written as-is (no platform translation) so the stored file
    matches the formatted text byte for byte.
    """
    p = path if isinstance(path, Path) else Path(path)
    kwargs.setdefault("newline", "")
    p.write_text(text, encoding="utf-8", **kwargs)


def ensure_file(path: PathLike) -> Path:
    """Create *path* (and its parent directories) empty if it does not exist."""
    p = path if isinstance(path, Path) else Path(path)
    if not p.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
        p.touch()
    return p
