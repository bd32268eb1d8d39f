"""Registry of available project templates, built-in and user-defined."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from maajise.base_template import BaseTemplate
from maajise.go_template import GoTemplate
from maajise.php_template import PHPTemplate
from maajise.python_template import PythonTemplate
from maajise.rust_template import RustTemplate
from maajise.templating import CustomTemplate, Template, parse_custom_template
from maajise.typescript_template import TypeScriptTemplate

_registry: dict[str, Template] = {}

_TEMPLATE_SUFFIXES = (".yaml", ".yml")


def register(template: Template) -> None:
    """Add a template, replacing any of the same name."""
    _registry[template.name] = template


def get(name: str) -> Template | None:
    """Return the template with the given name, or None."""
    return _registry.get(name)


def all_templates() -> list[Template]:
    """Return every registered template."""
    return list(_registry.values())


def names() -> list[str]:
    """Return the names of every registered template."""
    return list(_registry)


def load_custom_template(path: str | os.PathLike[str]) -> CustomTemplate | None:
    """Load and register a template from a YAML file; return None if it has no name."""
    text = Path(path).read_text(encoding="utf-8")
    template = parse_custom_template(text)
    if template is None:
        return None
    register(template)
    return template


def load_custom_templates(
    directory: str | os.PathLike[str] | None,
) -> list[CustomTemplate]:
    """Load every YAML template in a directory; unreadable files are skipped."""
    if not directory:
        return []
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except FileNotFoundError:
        return []

    loaded: list[CustomTemplate] = []
    for entry in entries:
        if entry.is_dir() or not entry.name.endswith(_TEMPLATE_SUFFIXES):
            continue
        try:
            template = load_custom_template(entry.path)
        except (OSError, ValueError, yaml.YAMLError):
            continue
        if template is not None:
            loaded.append(template)
    return loaded


def default_custom_templates_dir() -> Path | None:
    """Return ~/.maajise/templates, or None without a home directory."""
    try:
        return Path.home() / ".maajise" / "templates"
    except RuntimeError:
        return None


for _builtin in (
    BaseTemplate(),
    GoTemplate(),
    PHPTemplate(),
    PythonTemplate(),
    RustTemplate(),
    TypeScriptTemplate(),
):
    register(_builtin)

try:
    load_custom_templates(default_custom_templates_dir())
except OSError:
    pass