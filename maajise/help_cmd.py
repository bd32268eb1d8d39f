"""The help command."""

from __future__ import annotations

from collections.abc import Sequence

from maajise import ui
from maajise.command import Command, CommandError, all_commands, get, register


class HelpCommand(Command):
    """Show general help or the help of one command."""

    name = "help"
    description = "Display help information about commands"
    usage = "maajise help [command]"
    examples = ("maajise help", "maajise help init")

    def execute(self, args: Sequence[str]) -> None:
        """Show help for the named command, or general help without one."""
        _, rest = self._parse_flags(args)
        if rest:
            self._show_command_help(rest[0])
        else:
            self._show_general_help()

    def _show_general_help(self) -> None:
        print("Maajise - Project Initialization Tool")
        print()
        print("Usage:")
        print("  maajise <command> [arguments]")
        print("  maajise <project-name>         (shorthand for 'init <project-name>')")
        print()
        print("Available commands:")
        for cmd in sorted(all_commands(), key=lambda c: c.name):
            print(f"  {cmd.name:<12} {cmd.description}")
        print()
        print("Use 'maajise help <command>' for more information about a command.")

    def _show_command_help(self, command_name: str) -> None:
        cmd = get(command_name)
        if cmd is None:
            raise CommandError(f"unknown command: {command_name}")

        ui.header(f"Command: {cmd.name}")
        print(f"Description: {cmd.description}")
        print()
        print("Usage:")
        print(f"  {cmd.usage}")
        print()
        if cmd.examples:
            print("Examples:")
            for example in cmd.examples:
                print(f"  {example}")


register(HelpCommand())