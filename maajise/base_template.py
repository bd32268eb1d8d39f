"""The default language-agnostic project template."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from maajise.templating import Template


def _ignore_file(sections: Iterable[tuple[str, Sequence[str]]]) -> str:
    """Render commented blocks of ignore patterns separated by blank lines."""
    blocks = ("\n".join((f"# {title}", *patterns)) for title, patterns in sections)
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


_GITIGNORE = _ignore_file(
    [
        ("Dependencies", ("node_modules/", "vendor/", "packages/")),
        ("Build outputs", (".next/", "build/", "dist/", "target/", "out/", "*.o", "*.exe")),
        (
            "Logs",
            ("*.log", "logs/", "npm-debug.log*", "yarn-debug.log*", "yarn-error.log*"),
        ),
        ("Environment variables", (".env", ".env.local", ".env*.local")),
        ("IDE", (".vscode/", ".idea/", "*.swp", "*.swo", "*~")),
        ("OS", (".DS_Store", "Thumbs.db", "desktop.ini")),
        ("Testing", ("coverage/", ".nyc_output/")),
        ("Temporary files", ("*.tmp", "*.temp", ".cache/")),
    ]
)

_UBSIGNORE = _ignore_file(
    [
        ("UBS Scanner Ignore File", ("# Excludes non-source files from bug scanning",)),
        ("Dependencies", ("node_modules/", "vendor/", "packages/")),
        ("Build outputs", (".next/", "build/", "dist/", "target/", "out/", "bin/", "obj/")),
        ("Version control & IDE", (".git/", ".vscode/", ".idea/", ".beads/", ".claude/")),
        ("Documentation & metadata", ("docs/", "history/", "openspec/")),
        ("Scripts (usually not app code)", ("scripts/",)),
        ("Static assets", ("public/", "static/", "assets/")),
        (
            "File types to skip",
            ("*.md", "*.json", "*.config.*", "*.log", "*.txt", "*.lock", "*.sum"),
        ),
        ("Environment & secrets", (".env*", "*.key", "*.pem", "*.cert")),
    ]
)


def _readme(project_name: str) -> str:
    parts = [
        f"# {project_name}",
        "## Description",
        "[Add project description here]",
        "## Setup",
        _bash(
            (
                "Clone the repository",
                "git clone <repository-url>",
                f"cd {project_name}",
            ),
            ("[Add setup instructions here]",),
        ),
        "## Usage",
        "[Add usage instructions here]",
        "## Development",
        "### Prerequisites",
        "- [List prerequisites here]",
        "### Running Locally",
        _bash(("[Add development commands here]",)),
        "### Testing",
        _bash(("[Add testing commands here]",)),
        "## Issue Tracking",
        "This project uses Beads for issue tracking.",
        _bash(
            ("View all issues", "bd list"),
            (
                "Create new issue",
                'bd create --title "Issue title" --description "Issue description"',
            ),
            ("View issue details", "bd show <issue-id>"),
        ),
        "## Code Quality",
        "This project uses UBS (Ultimate Bug Scanner) for static analysis.",
        _bash(
            ("Run scanner on source code", "ubs ."),
            ("Run with strict mode (fail on warnings)", "ubs . --fail-on-warning"),
        ),
        "## Contributing",
        "[Add contribution guidelines here]",
        "## License",
        "[Add license information here]",
    ]
    return "\n\n".join(parts) + "\n"


class BaseTemplate(Template):
    """The default language-agnostic template."""

    name = "base"
    description = "Base template (language-agnostic)"
    dependencies = ("git", "bd")

    def files(self, project_name: str) -> dict[str, str]:
        """Return the .gitignore, .ubsignore and README.md files."""
        return {
            ".gitignore": _GITIGNORE,
            ".ubsignore": _UBSIGNORE,
            "README.md": _readme(project_name),
        }