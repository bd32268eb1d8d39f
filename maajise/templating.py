"""Project template interface, variable substitution and user-defined templates."""

from __future__ import annotations

import datetime
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import yaml

_ACTION = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_FIELD = re.compile(r"\.([A-Za-z_][A-Za-z0-9_]*)")
_TRIM_SPACE = " \t\r\n"
_PROJECT_NAME_MARKER = "{{.ProjectName}}"


class Template(ABC):
    """A named set of files that a new project starts with."""

    name: str
    description: str
    dependencies: tuple[str, ...]

    @abstractmethod
    def files(self, project_name: str) -> dict[str, str]:
        """Return a mapping of relative file paths to file contents."""


@dataclass
class TemplateVars:
    """Values available to template substitution."""

    project_name: str = ""
    author: str = ""
    email: str = ""
    year: str = ""
    license: str = ""
    github: str = ""

    def _fields(self) -> dict[str, str]:
        return {
            "ProjectName": self.project_name,
            "Author": self.author,
            "Email": self.email,
            "Year": self.year,
            "License": self.license,
            "GitHub": self.github,
        }


def default_vars(project_name: str) -> TemplateVars:
    """Return variables for a project with the current year and the MIT licence."""
    return TemplateVars(
        project_name=project_name,
        year=str(datetime.date.today().year),
        license="MIT",
    )


class _Unsupported(Exception):
    pass


def _render_action(inner: str, values: dict[str, str]) -> tuple[str, bool, bool]:
    trim_left = len(inner) >= 2 and inner[0] == "-" and inner[1] in _TRIM_SPACE
    trim_right = len(inner) >= 2 and inner[-1] == "-" and inner[-2] in _TRIM_SPACE
    body = inner
    if trim_left:
        body = body[2:]
    if trim_right:
        body = body[:-2]
    body = body.strip()

    if body.startswith("/*") and body.endswith("*/") and len(body) >= 4:
        return "", trim_left, trim_right

    match = _FIELD.fullmatch(body)
    if match is None or match.group(1) not in values:
        raise _Unsupported(body)
    return values[match.group(1)], trim_left, trim_right


def process_template(content: str, variables: TemplateVars) -> str:
    """Substitute {{.Field}} references; content that cannot be processed is returned as is."""
    values = variables._fields()
    pieces: list[str] = []
    position = 0
    trim_next = False
    try:
        for match in _ACTION.finditer(content):
            text = content[position : match.start()]
            value, trim_left, trim_right = _render_action(match.group(1), values)
            if trim_next:
                text = text.lstrip(_TRIM_SPACE)
            if trim_left:
                text = text.rstrip(_TRIM_SPACE)
            pieces.append(text)
            pieces.append(value)
            trim_next = trim_right
            position = match.end()
    except _Unsupported:
        return content

    tail = content[position:]
    if "{{" in tail:
        return content
    if trim_next:
        tail = tail.lstrip(_TRIM_SPACE)
    pieces.append(tail)
    return "".join(pieces)


def files_with_vars(template: Template, variables: TemplateVars) -> dict[str, str]:
    """Return the template's files with variable substitution applied."""
    return {
        name: process_template(content, variables)
        for name, content in template.files(variables.project_name).items()
    }


@dataclass
class CustomTemplate(Template):
    """A template defined by the user in a YAML file."""

    name: str
    description: str = ""
    dependencies: tuple[str, ...] = ()
    file_contents: dict[str, str] = field(default_factory=dict)

    def files(self, project_name: str) -> dict[str, str]:
        """Return the files with {{.ProjectName}} replaced by the project name."""
        return {
            name: content.replace(_PROJECT_NAME_MARKER, project_name)
            for name, content in self.file_contents.items()
        }


def _scalar(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"'{key}' must be a scalar value")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_custom_template(text: str) -> CustomTemplate | None:
    """Parse a YAML template definition; return None when it has no name."""
    data = yaml.safe_load(text)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError("template definition must be a mapping")

    name = _scalar(data.get("name"), "name")
    if not name:
        return None

    raw_deps = data.get("dependencies") or []
    if not isinstance(raw_deps, list):
        raise ValueError("'dependencies' must be a list")
    dependencies = tuple(_scalar(dep, "dependencies") for dep in raw_deps)

    raw_files = data.get("files") or {}
    if not isinstance(raw_files, dict):
        raise ValueError("'files' must be a mapping")
    file_contents = {
        _scalar(path, "files"): _scalar(content, "files")
        for path, content in raw_files.items()
    }

    return CustomTemplate(
        name=name,
        description=_scalar(data.get("description"), "description"),
        dependencies=dependencies,
        file_contents=file_contents,
    )