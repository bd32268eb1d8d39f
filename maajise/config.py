"""Initialization settings and the ~/.maajiserc configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = ".maajiserc"


@dataclass
class Defaults:
    """Default values for the init command."""

    template: str = ""
    git_name: str = ""
    git_email: str = ""
    skip_remote: bool = False
    skip_beads: bool = False
    main_branch: str = ""


@dataclass
class Variables:
    """Variables available for template substitution."""

    author: str = ""
    email: str = ""
    year: str = ""
    license: str = ""
    github: str = ""


@dataclass
class FileConfig:
    """Contents of the user configuration file."""

    defaults: Defaults = field(default_factory=Defaults)
    variables: Variables = field(default_factory=Variables)
    templates_dir: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain mapping using file key names."""
        return {
            "defaults": {
                "template": self.defaults.template,
                "git_name": self.defaults.git_name,
                "git_email": self.defaults.git_email,
                "skip_remote": self.defaults.skip_remote,
                "skip_beads": self.defaults.skip_beads,
                "main_branch": self.defaults.main_branch,
            },
            "variables": {
                "author": self.variables.author,
                "email": self.variables.email,
                "year": self.variables.year,
                "license": self.variables.license,
                "github": self.variables.github,
            },
            "templates_dir": self.templates_dir,
        }


@dataclass
class Config:
    """Settings for setting up a project."""

    project_name: str = ""
    in_place: bool = False
    no_overwrite: bool = False
    skip_git: bool = False
    skip_beads: bool = False
    skip_commit: bool = False
    skip_remote: bool = False
    skip_git_user: bool = False
    git_name: str = ""
    git_email: str = ""
    verbose: bool = False
    template: str = ""
    main_branch: str = "main"
    default_remote: str = ""

    def merge_file_config(self, file_config: FileConfig) -> None:
        """Fill empty string settings from the file configuration's defaults."""
        defaults = file_config.defaults
        if not self.template and defaults.template:
            self.template = defaults.template
        if not self.git_name and defaults.git_name:
            self.git_name = defaults.git_name
        if not self.git_email and defaults.git_email:
            self.git_email = defaults.git_email
        if not self.main_branch and defaults.main_branch:
            self.main_branch = defaults.main_branch


def default_config() -> Config:
    """Return a Config holding the default settings."""
    return Config()


def _mapping(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping")
    return value


def _string(section: dict[str, Any], key: str) -> str:
    value = section.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"'{key}' must be a scalar value")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flag(section: dict[str, Any], key: str) -> bool:
    value = section.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean")
    return value


def parse_file_config(text: str) -> FileConfig:
    """Parse configuration file text in YAML form."""
    data = yaml.safe_load(text)
    if data is None:
        return FileConfig()
    if not isinstance(data, dict):
        raise ValueError("configuration must be a mapping")

    defaults = _mapping(data, "defaults")
    variables = _mapping(data, "variables")
    return FileConfig(
        defaults=Defaults(
            template=_string(defaults, "template"),
            git_name=_string(defaults, "git_name"),
            git_email=_string(defaults, "git_email"),
            skip_remote=_flag(defaults, "skip_remote"),
            skip_beads=_flag(defaults, "skip_beads"),
            main_branch=_string(defaults, "main_branch"),
        ),
        variables=Variables(
            author=_string(variables, "author"),
            email=_string(variables, "email"),
            year=_string(variables, "year"),
            license=_string(variables, "license"),
            github=_string(variables, "github"),
        ),
        templates_dir=_string(data, "templates_dir"),
    )


def config_path() -> Path | None:
    """Return the path of the configuration file, or None without a home directory."""
    try:
        return Path.home() / CONFIG_FILE_NAME
    except RuntimeError:
        return None


def load_file_config() -> FileConfig:
    """Load the configuration file; an absent file gives an empty configuration."""
    path = config_path()
    if path is None:
        return FileConfig()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return FileConfig()
    return parse_file_config(text)


def save_file_config(file_config: FileConfig) -> None:
    """Write the configuration to the configuration file."""
    path = config_path()
    if path is None:
        raise FileNotFoundError("no home directory for the configuration file")
    path.write_text(
        yaml.safe_dump(file_config.to_dict(), sort_keys=False), encoding="utf-8"
    )


def config_exists() -> bool:
    """Return True if the configuration file exists."""
    path = config_path()
    return path is not None and path.exists()


def default_file_config() -> FileConfig:
    """Return a configuration filled with example values."""
    return FileConfig(
        defaults=Defaults(template="base", main_branch="main"),
        variables=Variables(year="2025", license="MIT"),
    )