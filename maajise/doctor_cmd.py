"""The doctor command, checking external tools and configuration."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

import yaml

from maajise import ui
from maajise.command import Command, CommandError, register
from maajise.config import config_exists, config_path, load_file_config


@dataclass
class DependencyCheck:
    """An external program to look for, and what was found."""

    name: str
    command: str
    args: tuple[str, ...] = ()
    required: bool = False
    version: str = ""
    found: bool = False
    error: str = ""


_CHECKS = (
    DependencyCheck("git", "git", ("--version",), required=True),
    DependencyCheck("bd (Beads)", "bd", ("--version",), required=True),
    DependencyCheck("ubs", "ubs", ("--version",), required=False),
    DependencyCheck("go", "go", ("version",), required=False),
)


def _load_config_quietly():
    try:
        return load_file_config()
    except (OSError, ValueError, yaml.YAMLError):
        return None


@dataclass
class DoctorCommand(Command):
    """Report which dependencies and configuration files are present."""

    name: str = field(default="doctor", init=False)
    description: str = field(
        default="Check system dependencies and configuration", init=False
    )
    usage: str = field(default="maajise doctor [flags]", init=False)
    examples: tuple[str, ...] = field(
        default=("maajise doctor", "maajise doctor --verbose"), init=False
    )

    def execute(self, args: Sequence[str]) -> None:
        """Run every check; raise CommandError if a required tool is missing."""
        opts, _ = self._parse_flags(args, verbose=(("v", "verbose"), False, "Verbose output"))
        verbose = opts["verbose"]

        ui.info("Checking maajise dependencies...")
        print()

        all_ok = True
        required_missing = False
        for check in map(self.run_check, _CHECKS):
            if check.found:
                ui.success(f"✓ {check.name}: {check.version}")
            else:
                all_ok = False
                if check.required:
                    required_missing = True
                    ui.error(f"✗ {check.name}: not found (required)")
                else:
                    ui.warn(f"○ {check.name}: not found (optional)")
            if verbose and check.error:
                print(f"    Error: {check.error}")

        print()
        ui.info("Configuration:")
        path = config_path()
        shown_path = "" if path is None else str(path)
        if config_exists():
            ui.success(f"✓ Config file: {shown_path}")
            if verbose:
                file_config = _load_config_quietly()
                if file_config is not None:
                    if file_config.defaults.template:
                        print(f"    Default template: {file_config.defaults.template}")
                    if file_config.defaults.git_name:
                        print(f"    Default git name: {file_config.defaults.git_name}")
        else:
            ui.warn(f"○ Config file: not found ({shown_path})")

        file_config = _load_config_quietly()
        if file_config is not None and file_config.templates_dir:
            ui.info(f"  Custom templates: {file_config.templates_dir}")

        print()

        if required_missing:
            raise CommandError("required dependencies missing")
        if all_ok:
            ui.success("All checks passed!")
        else:
            ui.info("Some optional dependencies missing (maajise will still work)")

    def run_check(self, check: DependencyCheck) -> DependencyCheck:
        """Run the check's command and return the check with its outcome filled in."""
        try:
            completed = subprocess.run(
                [check.command, *check.args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                check=False,
            )
        except FileNotFoundError:
            return replace(
                check,
                found=False,
                error=f'exec: "{check.command}": executable file not found in $PATH',
            )
        except OSError as exc:
            return replace(check, found=False, error=str(exc))

        if completed.returncode != 0:
            return replace(
                check, found=False, error=f"exit status {completed.returncode}"
            )

        version = completed.stdout.decode("utf-8", errors="replace").strip()
        return replace(check, found=True, version=version.split("\n", 1)[0], error="")


register(DoctorCommand())