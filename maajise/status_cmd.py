"""The status command, a quick overview of the current project."""

from __future__ import annotations

import os
from collections.abc import Sequence

from maajise import ui
from maajise.command import Command, register
from maajise.detect import detect_template
from maajise.fsutil import dir_exists, file_exists

_KEY_FILES = (".gitignore", ".ubsignore", "README.md")


class StatusCommand(Command):
    """Show the setup state of the project in the current directory."""

    name = "status"
    description = "Show quick project status"
    usage = "maajise status"
    examples = ("maajise status",)

    def execute(self, args: Sequence[str]) -> None:
        """Print git, Beads, template and key-file status."""
        self._parse_flags(args)

        cwd = os.getcwd()
        print(f"Project: {os.path.basename(cwd)}")
        print(f"Path:    {cwd}")
        print()

        if dir_exists(os.path.join(cwd, ".git")):
            ui.success("Git:     initialized")
        else:
            ui.warn("Git:     not initialized")

        if dir_exists(os.path.join(cwd, ".beads")):
            ui.success("Beads:   initialized")
        else:
            ui.warn("Beads:   not initialized")

        print(f"Template: {detect_template(cwd)}")

        print()
        print("Files:")
        for name in _KEY_FILES:
            mark = "✓" if file_exists(os.path.join(cwd, name)) else "✗"
            print(f"  {mark} {name}")


register(StatusCommand())