"""The templates command, listing available project templates."""

from __future__ import annotations

from collections.abc import Sequence

from maajise import catalog
from maajise.command import Command, register


class TemplatesCommand(Command):
    """List the available project templates."""

    name = "templates"
    description = "List available project templates"
    usage = "maajise templates"
    examples = ("maajise templates",)

    def execute(self, args: Sequence[str]) -> None:
        """Print every template with its description and dependencies."""
        self._parse_flags(args)

        print("Available templates:")
        print()
        for template in sorted(catalog.all_templates(), key=lambda t: t.name):
            print(f"  {template.name:<12}  {template.description}")
            if template.dependencies:
                deps = " ".join(template.dependencies)
                print(f"               Dependencies: [{deps}]")
        print()
        print("Usage: maajise init <project-name> --template=<template>")
        print()


register(TemplatesCommand())