"""The version command."""

from __future__ import annotations

from collections.abc import Sequence

from maajise.command import Command, register

VERSION = "2.0.0"


class VersionCommand(Command):
    """Print the version of the tool."""

    name = "version"
    description = "Display version information"
    usage = "maajise version"
    examples = ("maajise version",)

    def execute(self, args: Sequence[str]) -> None:
        """Print the version."""
        self._parse_flags(args)
        print(f"Maajise version {VERSION}")


register(VersionCommand())