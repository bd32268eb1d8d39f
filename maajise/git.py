"""Thin wrappers around the git command line."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Sequence

from maajise import ui


class GitError(Exception):
    """Raised when a git operation fails."""


def _run(args: Sequence[str], repo_dir: str | os.PathLike[str], verbose: bool) -> None:
    stream = None if verbose else subprocess.DEVNULL
    try:
        completed = subprocess.run(
            ["git", *args], cwd=repo_dir, stdout=stream, stderr=stream, check=False
        )
    except OSError as exc:
        raise GitError(str(exc)) from exc
    if completed.returncode != 0:
        raise GitError(f"exit status {completed.returncode}")


def _output(args: Sequence[str], repo_dir: str | os.PathLike[str]) -> str:
    try:
        completed = subprocess.run(
            ["git", *args], cwd=repo_dir, capture_output=True, text=True, check=False
        )
    except OSError as exc:
        raise GitError(str(exc)) from exc
    if completed.returncode != 0:
        raise GitError(f"exit status {completed.returncode}")
    return completed.stdout or ""


def init(repo_dir: str | os.PathLike[str], verbose: bool = False) -> None:
    """Initialize a git repository unless one already exists."""
    if os.path.exists(os.path.join(repo_dir, ".git")):
        ui.warn("Git already initialized")
        return

    ui.info("Initializing Git...")
    try:
        _run(["init"], repo_dir, verbose)
    except GitError:
        ui.error("Git init failed")
        raise
    ui.success("Git initialized")


def set_config(
    repo_dir: str | os.PathLike[str], key: str, value: str, verbose: bool = False
) -> None:
    """Set a configuration value in the repository."""
    try:
        _run(["config", key, value], repo_dir, verbose)
    except GitError as exc:
        raise GitError(f"failed to set git config {key}: {exc}") from exc


def get_config(repo_dir: str | os.PathLike[str], key: str) -> str:
    """Return a configuration value from the repository."""
    try:
        return _output(["config", key], repo_dir).strip()
    except GitError as exc:
        raise GitError(f"failed to get git config {key}: {exc}") from exc


def has_changes(repo_dir: str | os.PathLike[str]) -> bool:
    """Return True if the working tree has uncommitted changes."""
    try:
        return len(_output(["status", "--porcelain"], repo_dir)) > 0
    except GitError as exc:
        raise GitError(f"failed to check git status: {exc}") from exc


def add_files(
    repo_dir: str | os.PathLike[str], files: Sequence[str], verbose: bool = False
) -> None:
    """Stage the given files."""
    if not files:
        raise GitError("no files to add")
    try:
        _run(["add", *files], repo_dir, verbose)
    except GitError as exc:
        raise GitError(f"failed to add files: {exc}") from exc


def create_commit(
    repo_dir: str | os.PathLike[str], message: str, verbose: bool = False
) -> None:
    """Create a commit with the given message."""
    try:
        _run(["commit", "-m", message], repo_dir, verbose)
    except GitError as exc:
        raise GitError(f"failed to create commit: {exc}") from exc


def get_remote(repo_dir: str | os.PathLike[str], remote_name: str) -> str:
    """Return the URL of a named remote."""
    try:
        return _output(["remote", "get-url", remote_name], repo_dir).strip()
    except GitError as exc:
        raise GitError(f"remote {remote_name} not found") from exc


def add_remote(
    repo_dir: str | os.PathLike[str],
    remote_name: str,
    url: str,
    verbose: bool = False,
) -> None:
    """Add a remote to the repository."""
    try:
        _run(["remote", "add", remote_name, url], repo_dir, verbose)
    except GitError as exc:
        raise GitError(f"failed to add remote {remote_name}: {exc}") from exc


def check_available() -> str:
    """Return the path of the git executable; raise GitError if it is missing."""
    path = shutil.which("git")
    if path is None:
        raise GitError("git not found")
    return path