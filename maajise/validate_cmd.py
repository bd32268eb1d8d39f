"""The validate command, checking the setup of the current project."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from maajise import catalog, ui
from maajise.command import Command, CommandError, register
from maajise.detect import detect_template
from maajise.fsutil import dir_exists, file_exists

_COMMON_FILES = (".gitignore", "README.md", ".ubsignore")
_REQUIRED_FILES = (".gitignore", "README.md")


@dataclass(frozen=True)
class ValidationResult:
    """The outcome of one check: status is "pass", "warn" or "fail"."""

    check: str
    status: str
    message: str


class ValidateCommand(Command):
    """Validate the project in the current directory."""

    name = "validate"
    description = "Validate project setup and configuration"
    usage = "maajise validate [flags]"
    examples = (
        "maajise validate",
        "maajise validate --strict",
        "maajise validate --verbose",
    )

    def __init__(self, verbose: bool = False, strict: bool = False) -> None:
        self.verbose = verbose
        self.strict = strict

    def execute(self, args: Sequence[str]) -> None:
        """Run every check; raise CommandError on failures, or warnings with --strict."""
        opts, _ = self._parse_flags(
            args,
            verbose=(("v", "verbose"), self.verbose, "Verbose output"),
            strict=(("strict",), self.strict, "Treat warnings as failures"),
        )
        self.verbose = opts["verbose"]
        self.strict = opts["strict"]

        cwd = os.getcwd()
        ui.info(f"Validating project: {os.path.basename(cwd)}")
        print()

        results = [self.check_git(cwd), self.check_beads(cwd)]
        results.extend(self.check_required_files(cwd))

        template = detect_template(cwd)
        if self.verbose:
            ui.info(f"Detected template: {template}")
        results.extend(self.check_template_files(cwd, template))

        counts = {"pass": 0, "warn": 0, "fail": 0}
        for result in results:
            text = f"{result.check}: {result.message}"
            if result.status == "pass":
                ui.success(f"✓ {text}")
            elif result.status == "warn":
                ui.warn(f"⚠ {text}")
            elif result.status == "fail":
                ui.error(f"✗ {text}")
            else:
                continue
            counts[result.status] += 1

        print()
        ui.info(
            f"Results: {counts['pass']} passed, {counts['warn']} warnings, "
            f"{counts['fail']} failed"
        )

        if counts["fail"]:
            raise CommandError(f"validation failed with {counts['fail']} errors")
        if self.strict and counts["warn"]:
            raise CommandError(
                f"validation failed with {counts['warn']} warnings (strict mode)"
            )

    def check_git(self, directory: str) -> ValidationResult:
        """Fail unless the directory is a git repository."""
        if dir_exists(os.path.join(directory, ".git")):
            return ValidationResult("Git", "pass", "Repository initialized")
        return ValidationResult("Git", "fail", "Not a git repository (run 'git init')")

    def check_beads(self, directory: str) -> ValidationResult:
        """Warn unless Beads is initialized."""
        if dir_exists(os.path.join(directory, ".beads")):
            return ValidationResult("Beads", "pass", "Issue tracking initialized")
        return ValidationResult("Beads", "warn", "Not initialized (run 'bd init')")

    def check_required_files(self, directory: str) -> list[ValidationResult]:
        """Check .gitignore and README.md, and .ubsignore as a recommendation."""
        results = [
            ValidationResult(name, "pass", "Present")
            if file_exists(os.path.join(directory, name))
            else ValidationResult(name, "warn", "Missing")
            for name in _REQUIRED_FILES
        ]
        if file_exists(os.path.join(directory, ".ubsignore")):
            results.append(ValidationResult(".ubsignore", "pass", "Present"))
        elif self.verbose:
            results.append(
                ValidationResult(".ubsignore", "warn", "Missing (recommended)")
            )
        return results

    def check_template_files(
        self, directory: str, template: str
    ) -> list[ValidationResult]:
        """Warn about files the template expects that are missing."""
        tmpl = catalog.get(template)
        if tmpl is None:
            return []

        results = []
        for filename in tmpl.files(os.path.basename(directory)):
            if filename in _COMMON_FILES:
                continue
            if file_exists(os.path.join(directory, filename)):
                if self.verbose:
                    results.append(ValidationResult(filename, "pass", "Present"))
            else:
                results.append(
                    ValidationResult(
                        filename, "warn", f"Missing (expected for {template} template)"
                    )
                )
        return results


register(ValidateCommand())