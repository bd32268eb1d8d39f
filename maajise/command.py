"""The command interface, the command registry and command-line flag parsing."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Sequence
from typing import Any, Union

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

FlagValue = Union[bool, str]


class CommandError(Exception):
    """Raised when a command fails."""


class Command(ABC):
    """A subcommand of the command-line tool."""

    name: str
    description: str
    usage: str
    examples: tuple[str, ...] = ()

    @abstractmethod
    def execute(self, args: Sequence[str]) -> None:
        """Run the command with its arguments; raise CommandError on failure."""

    def _parse_flags(
        self, args: Sequence[str], **options: tuple[tuple[str, ...], FlagValue, str]
    ) -> tuple[dict[str, Any], list[str]]:
        """Parse leading flags.

        Each keyword names a destination and gives (flag names, default, help).
        A bool default makes a switch, a str default a flag taking a value.
        Returns the values by destination and the remaining arguments.
        """
        lookup = {
            flag: dest for dest, (flag_names, _, _) in options.items() for flag in flag_names
        }
        values: dict[str, Any] = {dest: spec[1] for dest, spec in options.items()}
        pending = deque(args)

        while pending:
            arg = pending[0]
            if len(arg) < 2 or arg[0] != "-":
                break
            pending.popleft()
            minuses = 2 if arg[1] == "-" else 1
            if minuses == 2 and len(arg) == 2:
                break
            name = arg[minuses:]
            if not name or name[0] in "-=":
                self._flag_error(f"bad flag syntax: {arg}", options)

            name, has_value, value = name.partition("=")
            dest = lookup.get(name)
            if dest is None:
                if name in ("h", "help"):
                    self._print_flag_usage(options)
                    raise CommandError("flag: help requested")
                self._flag_error(f"flag provided but not defined: -{name}", options)

            if isinstance(options[dest][1], bool):
                if not has_value:
                    values[dest] = True
                elif value in _TRUE_WORDS:
                    values[dest] = True
                elif value in _FALSE_WORDS:
                    values[dest] = False
                else:
                    self._flag_error(
                        f'invalid boolean value "{value}" for -{name}: parse error',
                        options,
                    )
            else:
                if not has_value:
                    if not pending:
                        self._flag_error(f"flag needs an argument: -{name}", options)
                    value = pending.popleft()
                values[dest] = value

        return values, list(pending)

    def _flag_error(
        self, message: str, options: dict[str, tuple[tuple[str, ...], FlagValue, str]]
    ) -> None:
        print(message, file=sys.stderr)
        self._print_flag_usage(options)
        raise CommandError(message)

    def _print_flag_usage(
        self, options: dict[str, tuple[tuple[str, ...], FlagValue, str]]
    ) -> None:
        entries = sorted(
            (
                (flag, default, text)
                for flag_names, default, text in options.values()
                for flag in flag_names
            ),
            key=lambda entry: entry[0],
        )
        lines = [f"Usage of {self.name}:"]
        for flag, default, text in entries:
            if isinstance(default, bool):
                lead = f"  -{flag}"
                separator = "\t" if len(flag) == 1 else "\n    \t"
                suffix = " (default true)" if default else ""
            else:
                lead = f"  -{flag} string"
                separator = "\n    \t"
                suffix = f' (default "{default}")' if default else ""
            lines.append(f"{lead}{separator}{text}{suffix}")
        print("\n".join(lines), file=sys.stderr)


_registry: dict[str, Command] = {}


def register(command: Command) -> None:
    """Add a command to the registry, replacing any of the same name."""
    _registry[command.name] = command


def get(name: str) -> Command | None:
    """Return the command with the given name, or None."""
    return _registry.get(name)


def all_commands() -> list[Command]:
    """Return every registered command."""
    return list(_registry.values())