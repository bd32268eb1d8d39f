"""Project template detection from marker files."""

from __future__ import annotations

import os

from maajise.fsutil import file_exists

_MARKERS = (
    ("package.json", "typescript"),
    ("tsconfig.json", "typescript"),
    ("Cargo.toml", "rust"),
    ("pyproject.toml", "python"),
    ("requirements.txt", "python"),
    ("composer.json", "php"),
    ("go.mod", "go"),
)


def detect_template(directory: str | os.PathLike[str]) -> str:
    """Return the template name suggested by marker files, or "base"."""
    for marker, template in _MARKERS:
        if file_exists(os.path.join(directory, marker)):
            return template
    return "base"