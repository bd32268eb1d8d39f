"""The update command, refreshing template files in an existing project."""

from __future__ import annotations

import os
from collections.abc import Sequence

from maajise import catalog, ui
from maajise.command import Command, CommandError, register
from maajise.detect import detect_template
from maajise.fsutil import path_exists


class UpdateCommand(Command):
    """Write template files into the project in the current directory."""

    name = "update"
    description = "Update configuration files in an existing project"
    usage = "maajise update [flags] [files...]"
    examples = (
        "maajise update",
        "maajise update --force",
        "maajise update --template=typescript",
        "maajise update .gitignore .ubsignore",
        "maajise update --dry-run",
    )

    def execute(self, args: Sequence[str]) -> None:
        """Create missing template files, or overwrite them with --force."""
        opts, files_only = self._parse_flags(
            args,
            force=(("force",), False, "Overwrite existing files (default: skip existing)"),
            template=(("template",), "", "Template to use (auto-detects if not specified)"),
            verbose=(("v", "verbose"), False, "Verbose output"),
            dry_run=(
                ("dry-run",),
                False,
                "Show what would be updated without making changes",
            ),
        )
        force, verbose, dry_run = opts["force"], opts["verbose"], opts["dry_run"]

        cwd = os.getcwd()
        project_name = os.path.basename(cwd)

        template_name = opts["template"]
        if not template_name:
            template_name = detect_template(cwd)
            if verbose:
                ui.info(f"Detected template: {template_name}")

        template = catalog.get(template_name)
        if template is None:
            raise CommandError(f"unknown template: {template_name}")

        files = template.files(project_name)
        if files_only:
            selected: dict[str, str] = {}
            for name in files_only:
                if name in files:
                    selected[name] = files[name]
                else:
                    ui.warn(f"File {name} not in template {template_name}")
            files = selected

        if not files:
            raise CommandError("no files to update")

        updated = skipped = 0
        for filename, content in files.items():
            path = os.path.join(cwd, filename)
            existed = path_exists(path)

            if dry_run:
                if not existed:
                    ui.info(f"[dry-run] Would create: {filename}")
                elif force:
                    ui.info(f"[dry-run] Would overwrite: {filename}")
                else:
                    ui.info(f"[dry-run] Would skip (exists): {filename}")
                continue

            if existed and not force:
                if verbose:
                    ui.warn(f"Skipped {filename} (exists, use --force to overwrite)")
                skipped += 1
                continue

            directory = os.path.dirname(path)
            if directory not in ("", "."):
                try:
                    os.makedirs(directory, mode=0o755, exist_ok=True)
                except OSError as exc:
                    raise CommandError(
                        f"failed to create directory {directory}: {exc}"
                    ) from exc

            try:
                with open(path, "w", encoding="utf-8", newline="") as handle:
                    handle.write(content)
            except OSError as exc:
                raise CommandError(f"failed to write {filename}: {exc}") from exc

            ui.success(f"{'Updated' if existed else 'Created'} {filename}")
            updated += 1

        if not dry_run:
            print()
            ui.info(f"Updated: {updated}, Skipped: {skipped}")


register(UpdateCommand())