"""Setup of Beads issue tracking through the bd command."""

from __future__ import annotations

import os
import shutil
import subprocess

from maajise import ui


class BeadsError(Exception):
    """Raised when Beads is not available."""


def init(repo_dir: str | os.PathLike[str], verbose: bool = False) -> None:
    """Initialize Beads in a repository; a failing bd only produces a warning."""
    if os.path.exists(os.path.join(repo_dir, ".beads")):
        ui.warn("Beads already initialized")
        return

    ui.info("Initializing Beads...")

    stream = None if verbose else subprocess.DEVNULL
    try:
        completed = subprocess.run(
            ["bd", "init"], cwd=repo_dir, stdout=stream, stderr=stream, check=False
        )
        failed = completed.returncode != 0
    except OSError:
        failed = True

    if failed:
        ui.warn("Beads init failed (run 'bd init' manually)")
        return

    ui.success("Beads initialized")


def check_available() -> str:
    """Return the path of the bd executable; raise BeadsError if it is missing."""
    path = shutil.which("bd")
    if path is None:
        raise BeadsError("beads (bd) not found")
    return path