"""Small filesystem helpers."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _stat(path: PathLike) -> os.stat_result | None:
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def file_exists(path: PathLike) -> bool:
    """Return True if the path exists and is not a directory."""
    info = _stat(path)
    return info is not None and not stat.S_ISDIR(info.st_mode)


def dir_exists(path: PathLike) -> bool:
    """Return True if the path exists and is a directory."""
    info = _stat(path)
    return info is not None and stat.S_ISDIR(info.st_mode)


def path_exists(path: PathLike) -> bool:
    """Return True if anything exists at the path."""
    return _stat(path) is not None


def ensure_dir(path: PathLike) -> None:
    """Create a directory and its parents; raise if the path is a non-directory."""
    if dir_exists(path):
        return
    if path_exists(path):
        raise FileExistsError(f"{os.fspath(path)} exists and is not a directory")
    Path(path).mkdir(mode=0o755, parents=True, exist_ok=True)


def ensure_parent_dir(path: PathLike) -> None:
    """Create all parent directories of a path."""
    parent = os.path.dirname(os.fspath(path))
    if parent in ("", "."):
        return
    ensure_dir(parent)