"""Project template for Python with pip and venv."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from maajise.templating import Template

_INDENT = " " * 4
_NOTE_COLUMN = 18


def _ignore_file(sections: Iterable[tuple[str, Sequence[str]]]) -> str:
    """Render commented blocks of lines separated by blank lines."""
    blocks = ("\n".join((f"# {title}", *lines)) for title, lines in sections)
    return "\n\n".join(blocks) + "\n"


def _bash(*groups: Sequence[str | None]) -> str:
    """Render a bash code fence; each group is a comment followed by commands."""
    rendered = []
    for comment, *commands in groups:
        lines = [f"# {comment}"] if comment else []
        lines.extend(commands)
        rendered.append("\n".join(lines))
    body = "\n\n".join(rendered)
    return f"```bash\n{body}\n```"


def _note(command: str, note: str) -> str:
    """Return a command with a trailing comment aligned to a fixed column."""
    gap = max(2, _NOTE_COLUMN - len(command))
    return f"{command}{' ' * gap}# {note}"


def _quoted(text: str) -> str:
    return f'"{text}"'


def _toml(tables: Iterable[tuple[str, Sequence[tuple[str, str]]]]) -> str:
    """Render TOML tables from already formatted values."""
    rendered = (
        "\n".join([f"[{table}]", *(f"{key} = {value}" for key, value in entries)])
        for table, entries in tables
    )
    return "\n\n".join(rendered) + "\n"


def _multiline_list(items: Iterable[str]) -> str:
    body = "".join(f"{_INDENT}{_quoted(item)},\n" for item in items)
    return f"[\n{body}]"


_GITIGNORE = _ignore_file(
    [
        ("Python", ("__pycache__/", "*.py[cod]", "*$py.class", "*.so")),
        ("Virtual environments", ("venv/", ".venv/", "ENV/", "env/")),
        ("Distribution", ("dist/", "build/", "*.egg-info/", "*.egg")),
        ("IDE", (".vscode/", ".idea/", "*.swp", "*.swo")),
        ("Testing", (".pytest_cache/", ".coverage", "htmlcov/", ".tox/")),
        ("Environment", (".env", ".env.local")),
        ("OS", (".DS_Store", "Thumbs.db")),
        ("Type checking", (".mypy_cache/",)),
    ]
)

_UBSIGNORE = _ignore_file(
    [
        (
            "UBS Scanner Ignore File",
            (
                "__pycache__/",
                "venv/",
                ".venv/",
                "dist/",
                "build/",
                "*.egg-info/",
                ".git/",
                ".vscode/",
                ".idea/",
                ".beads/",
                ".claude/",
                ".pytest_cache/",
                "htmlcov/",
                "*.md",
                "*.txt",
                "*.toml",
                "*.cfg",
            ),
        ),
    ]
)

_REQUIREMENTS = _ignore_file(
    [
        ("Core dependencies", ("# Add your dependencies here",)),
        ("Development dependencies", ("pytest>=7.0.0", "mypy>=1.0.0")),
    ]
)

_MAIN_PY = (
    "\n\n\n".join(
        [
            _quoted('""Main entry point.""'),
            "\n".join(
                [
                    "def main() -> None:",
                    _INDENT + _quoted('""Run the application.""'),
                    _INDENT + "print(" + _quoted("Hello, Python!") + ")",
                ]
            ),
            "\n".join(
                [
                    "if __name__ == " + _quoted("__main__") + ":",
                    _INDENT + "main()",
                ]
            ),
        ]
    )
    + "\n"
)


def _readme(project_name: str) -> str:
    parts = [
        f"# {project_name}",
        "A Python project.",
        "## Setup",
        _bash(
            ("Create virtual environment", "python -m venv venv"),
            ("Activate (Linux/Mac)", "source venv/bin/activate"),
            ("Activate (Windows)", "venv\\Scripts\\activate"),
            ("Install dependencies", "pip install -r requirements.txt"),
        ),
        "## Development",
        _bash(
            ("Run the application", "python src/main.py"),
            ("Run tests", "pytest"),
            ("Type checking", "mypy src/"),
        ),
        "## Issue Tracking",
        _bash(
            (
                None,
                _note("bd list", "View issues"),
                _note('bd create --title "Task"', "Create issue"),
            )
        ),
        "## Code Quality",
        _bash((None, _note("ubs .", "Scan for bugs"))),
    ]
    return "\n\n".join(parts) + "\n"


def _pyproject(project_name: str) -> str:
    return _toml(
        [
            (
                "build-system",
                [
                    ("requires", f"[{_quoted('setuptools>=61.0')}]"),
                    ("build-backend", _quoted("setuptools.build_meta")),
                ],
            ),
            (
                "project",
                [
                    ("name", _quoted(project_name)),
                    ("version", _quoted("0.1.0")),
                    ("description", _quoted("")),
                    ("readme", _quoted("README.md")),
                    ("requires-python", _quoted(">=3.9")),
                    ("dependencies", "[]"),
                ],
            ),
            (
                "project.optional-dependencies",
                [("dev", _multiline_list(("pytest", "mypy")))],
            ),
        ]
    )


class PythonTemplate(Template):
    """A Python project with pip/venv configuration."""

    name = "python"
    description = "Python project with pip/venv configuration"
    dependencies = ("git", "bd", "python3", "pip")

    def files(self, project_name: str) -> dict[str, str]:
        """Return the files of a new Python project."""
        return {
            ".gitignore": _GITIGNORE,
            ".ubsignore": _UBSIGNORE,
            "README.md": _readme(project_name),
            "pyproject.toml": _pyproject(project_name),
            "requirements.txt": _REQUIREMENTS,
            "src/__init__.py": "",
            "src/main.py": _MAIN_PY,
        }