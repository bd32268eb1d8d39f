"""Project template for TypeScript with npm."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from maajise.templating import Template

_NOTE_COLUMN = 18
_JSON_INDENT = "  "


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


def _note(command: str, note: str) -> str:
    """Return a command with a trailing comment aligned to a fixed column."""
    gap = max(2, _NOTE_COLUMN - len(command))
    return f"{command}{' ' * gap}# {note}"


def _json_object(obj: Mapping[str, Any], depth: int = 1) -> str:
    """Render nested objects over several lines and other values inline."""
    pad = _JSON_INDENT * depth
    items = []
    for key, value in obj.items():
        if isinstance(value, Mapping):
            text = _json_object(value, depth + 1)
        else:
            text = json.dumps(value, ensure_ascii=False)
        items.append(f"{pad}{json.dumps(key)}: {text}")
    closing = _JSON_INDENT * (depth - 1)
    return "{\n" + ",\n".join(items) + "\n" + closing + "}"


_GITIGNORE = _ignore_file(
    [
        ("Dependencies", ("node_modules/",)),
        (
            "Build outputs",
            ("dist/", "build/", "*.js", "*.js.map", "*.d.ts", "!*.config.js"),
        ),
        ("Logs", ("*.log", "npm-debug.log*", "yarn-debug.log*", "yarn-error.log*")),
        ("Environment", (".env", ".env.local", ".env*.local")),
        ("IDE", (".vscode/", ".idea/", "*.swp", "*.swo")),
        ("OS", (".DS_Store", "Thumbs.db")),
        ("Testing", ("coverage/", ".nyc_output/")),
        ("Cache", (".cache/", "*.tsbuildinfo")),
    ]
)

_UBSIGNORE = _ignore_file(
    [
        (
            "UBS Scanner Ignore File",
            (
                "node_modules/",
                "dist/",
                "build/",
                "coverage/",
                ".git/",
                ".vscode/",
                ".idea/",
                ".beads/",
                ".claude/",
                "*.md",
                "*.json",
                "*.lock",
                "*.log",
            ),
        ),
    ]
)

_TSCONFIG = (
    _json_object(
        {
            "compilerOptions": {
                "target": "ES2022",
                "module": "commonjs",
                "lib": ["ES2022"],
                "outDir": "./dist",
                "rootDir": "./src",
                "strict": True,
                "esModuleInterop": True,
                "skipLibCheck": True,
                "forceConsistentCasingInFileNames": True,
                "declaration": True,
                "declarationMap": True,
                "sourceMap": True,
            },
            "include": ["src/**/*"],
            "exclude": ["node_modules", "dist"],
        }
    )
    + "\n"
)

_INDEX_TS = "\n".join(["// Entry point", "console.log(" + json.dumps("Hello, TypeScript!") + ");"]) + "\n"


def _readme(project_name: str) -> str:
    parts = [
        f"# {project_name}",
        "A TypeScript project.",
        "## Setup",
        _bash((None, "npm install")),
        "## Development",
        _bash(
            ("Run in development mode", "npm run dev"),
            ("Build for production", "npm run build"),
            ("Run tests", "npm test"),
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


def _package_json(project_name: str) -> str:
    rendered = _json_object(
        {
            "name": "",
            "version": "0.1.0",
            "description": "",
            "main": "dist/index.js",
            "types": "dist/index.d.ts",
            "scripts": {
                "build": "tsc",
                "dev": "tsc --watch",
                "start": "node dist/index.js",
                "test": 'echo "Error: no test specified" && exit 1',
            },
            "keywords": [],
            "author": "",
            "license": "ISC",
            "devDependencies": {"typescript": "^5.0.0"},
        }
    )
    # The project name goes in verbatim, without JSON escaping.
    rendered = rendered.replace('"name": ""', f'"name": "{project_name}"', 1)
    return rendered + "\n"


class TypeScriptTemplate(Template):
    """A TypeScript project with npm configuration."""

    name = "typescript"
    description = "TypeScript project with npm configuration"
    dependencies = ("git", "bd", "node", "npm")

    def files(self, project_name: str) -> dict[str, str]:
        """Return the files of a new TypeScript project."""
        return {
            ".gitignore": _GITIGNORE,
            ".ubsignore": _UBSIGNORE,
            "README.md": _readme(project_name),
            "package.json": _package_json(project_name),
            "tsconfig.json": _TSCONFIG,
            "src/index.ts": _INDEX_TS,
        }