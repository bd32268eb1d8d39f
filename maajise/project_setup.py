"""Creation of a new project: directories, git, Beads, template files and first commit."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

from maajise import beads, catalog, git, ui
from maajise.command import CommandError
from maajise.config import Config
from maajise.fsutil import file_exists, path_exists
from maajise.validate import ValidationError, validate_git_url

INITIAL_COMMIT_MESSAGE = """Initial commit

- Add .ubsignore for UBS scanner
- Add .gitignore for version control
- Add README.md with project structure
- Initialize Beads issue tracking"""


def _read_line(stream: TextIO) -> str:
    """Read one line; a line that ends without a newline counts as end of input."""
    line = stream.readline()
    if not line.endswith("\n"):
        raise EOFError("EOF")
    return line


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _valid_email(email: str) -> bool:
    return "@" in email and "." in email


@dataclass
class ProjectSetup:
    """Sets up a project from a configuration and a template name."""

    config: Config
    template: str = "base"
    input_stream: TextIO = field(default_factory=lambda: sys.stdin)

    def run(self) -> str:
        """Perform every setup step and return the repository path."""
        repo_path = self.create_structure()
        self.init_git(repo_path)
        self.configure_git_user(repo_path)
        self.init_beads(repo_path)
        self.create_files(repo_path)
        self.create_initial_commit(repo_path)
        self.setup_git_remote(repo_path)
        self.show_summary(repo_path)
        return repo_path

    def create_structure(self) -> str:
        """Create the nested project directory, or use the current one in place."""
        cfg = self.config
        if cfg.in_place:
            cwd = os.getcwd()
            if cfg.verbose:
                ui.info(f"Using current directory: {cwd}")
            return cwd

        ui.info("Creating directory structure...")
        inner_path = os.path.join(cfg.project_name, cfg.project_name)
        if path_exists(cfg.project_name):
            raise CommandError(f"directory '{cfg.project_name}' already exists")
        try:
            os.makedirs(inner_path, mode=0o755, exist_ok=True)
        except OSError as exc:
            raise CommandError(str(exc)) from exc

        ui.success(f"Created {inner_path}/")
        return inner_path

    def init_git(self, repo_dir: str) -> None:
        """Initialize a git repository unless git is skipped."""
        if self.config.skip_git:
            if self.config.verbose:
                ui.info("Skipping Git (--skip-git)")
            return
        try:
            git.init(repo_dir, self.config.verbose)
        except git.GitError as exc:
            raise CommandError(str(exc)) from exc

    def configure_git_user(self, repo_dir: str) -> None:
        """Set user.name and user.email, from settings or by asking."""
        cfg = self.config
        if cfg.skip_git or cfg.skip_git_user:
            if cfg.verbose:
                ui.info("Skipping Git user configuration")
            return

        if cfg.git_name and cfg.git_email:
            user_name, user_email = cfg.git_name, cfg.git_email
            if not _valid_email(user_email):
                raise CommandError("invalid email format")
            if cfg.verbose:
                ui.info(f"Using provided Git config: {user_name} <{user_email}>")
        else:
            ui.info("Configuring Git user...")
            print()

            _prompt("→ Git user.name (full name): ")
            try:
                user_name = _read_line(self.input_stream).strip()
            except EOFError as exc:
                raise CommandError(f"failed to read user name: {exc}") from exc
            if not user_name:
                raise CommandError("git user.name cannot be empty")

            _prompt("→ Git user.email (email address): ")
            try:
                user_email = _read_line(self.input_stream).strip()
            except EOFError as exc:
                raise CommandError(f"failed to read user email: {exc}") from exc
            if not user_email:
                raise CommandError("git user.email cannot be empty")
            if not _valid_email(user_email):
                raise CommandError("invalid email format")

        try:
            git.set_config(repo_dir, "user.name", user_name, cfg.verbose)
            git.set_config(repo_dir, "user.email", user_email, cfg.verbose)
        except git.GitError as exc:
            raise CommandError(str(exc)) from exc

        ui.success(f"Git user configured: {user_name} <{user_email}>")
        print()

    def init_beads(self, repo_dir: str) -> None:
        """Initialize Beads issue tracking unless it is skipped."""
        if self.config.skip_beads:
            if self.config.verbose:
                ui.info("Skipping Beads (--skip-beads)")
            return
        beads.init(repo_dir, self.config.verbose)

    def create_files(self, repo_dir: str) -> None:
        """Write every file of the template into the repository."""
        template = catalog.get(self.template)
        if template is None:
            raise CommandError(
                f"unknown template: {self.template} "
                "(use 'maajise templates' to list available)"
            )
        for filename, content in template.files(self.config.project_name).items():
            self._write_file(os.path.join(repo_dir, filename), content)

    def _write_file(self, path: str, content: str) -> None:
        name = os.path.basename(path)
        if file_exists(path):
            if self.config.no_overwrite:
                ui.warn(f"Skipped {name} (exists, --no-overwrite)")
                return
            ui.warn(f"Overwriting {name}")

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
            raise CommandError(str(exc)) from exc
        ui.success(f"Created {path}")

    def create_initial_commit(self, repo_dir: str) -> None:
        """Stage the template files and commit them."""
        cfg = self.config
        if cfg.skip_git or cfg.skip_commit:
            if cfg.verbose:
                ui.info("Skipping initial commit")
            return

        ui.info("Creating initial commit...")
        try:
            if not git.has_changes(repo_dir):
                ui.warn("Nothing to commit")
                return
            template = catalog.get(self.template)
            if template is None:
                raise CommandError(f"unknown template: {self.template}")
            file_list = list(template.files(cfg.project_name))
            git.add_files(repo_dir, file_list, cfg.verbose)
            git.create_commit(repo_dir, INITIAL_COMMIT_MESSAGE, cfg.verbose)
        except git.GitError as exc:
            raise CommandError(str(exc)) from exc

        ui.success("Initial commit created")

    def setup_git_remote(self, repo_dir: str) -> None:
        """Offer to add an 'origin' remote; problems are reported, never raised."""
        cfg = self.config
        if cfg.skip_git or cfg.skip_remote:
            if cfg.verbose:
                ui.info("Skipping remote setup")
            return

        try:
            existing_url = git.get_remote(repo_dir, "origin")
        except git.GitError:
            pass
        else:
            ui.warn(f"Remote 'origin' already exists: {existing_url}")
            return

        print()
        ui.info("Git remote setup (optional)")
        print()

        _prompt("? Add git remote? (y/N): ")
        try:
            response = _read_line(self.input_stream).strip()
        except EOFError:
            return
        if response.lower() != "y":
            ui.info("Skipped remote setup")
            return

        print()
        ui.info(
            "Enter remote URL (e.g., https://github.com/username/"
            f"{cfg.project_name}.git)"
        )
        _prompt("→ Remote URL: ")
        try:
            remote_url = _read_line(self.input_stream).strip()
        except EOFError:
            return
        if not remote_url:
            ui.info("Skipped remote setup")
            return

        try:
            validate_git_url(remote_url)
        except ValidationError as exc:
            ui.error(f"Invalid git remote URL: {exc}")
            return

        try:
            git.add_remote(repo_dir, "origin", remote_url, cfg.verbose)
        except git.GitError:
            ui.warn("Failed to add remote (may already exist)")
            return

        ui.success(f"Added remote: origin → {remote_url}")
        print()
        ui.info("Push to remote with:")
        if not cfg.in_place:
            print(f"  cd {cfg.project_name}/{cfg.project_name}")
        print("  git push -u origin main")
        print()

    def show_summary(self, repo_path: str) -> None:
        """Print the closing summary and next steps."""
        cfg = self.config
        ui.summary(
            "✓ Repository initialized successfully!",
            "",
            f"Project: {cfg.project_name}",
            f"Location: {repo_path}",
        )

        ui.info("Next steps:")
        if not cfg.in_place:
            print(f"  1. cd {cfg.project_name}/{cfg.project_name}")
            print("  2. Create your project files")
        else:
            print("  1. Create your project files")

        print("  2. Run 'ubs .' to scan for issues")
        print("  3. Run 'bd list' to manage tasks")
        print()
        ui.info("Quick commands:")
        print('  bd create --title "Task name"    # Create new task')
        print("  bd list                           # View all tasks")
        print("  ubs .                             # Scan for bugs")
        print()