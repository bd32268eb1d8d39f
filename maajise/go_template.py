"""Project template for Go modules."""

from __future__ import annotations

from maajise.templating import Template

_GITIGNORE = """# Go
/bin/
/dist/
*.exe
*.exe~
*.dll
*.so
*.dylib
*.test
*.out

# Dependency directories
/vendor/

# IDE
.vscode/
.idea/
*.swp
*.swo

# OS
.DS_Store
Thumbs.db

# Environment
.env

# Coverage
coverage.out
coverage.html
"""

_UBSIGNORE = """# UBS Scanner Ignore File
bin/
dist/
vendor/
.git/
.vscode/
.idea/
.beads/
.claude/
*.md
*.sum
*.mod
"""

_MAIN_GO = (
    "package main\n"
    "\n"
    'import "fmt"\n'
    "\n"
    "func main() {\n"
    '\tfmt.Println("Hello, Go!")\n'
    "}\n"
)


def _readme(project_name: str) -> str:
    return f"""# {project_name}

A Go project.

## Setup

```bash
# Download dependencies
go mod download
```

## Development

```bash
# Run the application
go run .

# Build
go build -o bin/{project_name} .

# Run tests
go test ./...

# Run tests with coverage
go test -cover ./...
```

## Issue Tracking

```bash
bd list           # View issues
bd create --title "Task"  # Create issue
```

## Code Quality

```bash
ubs .             # Scan for bugs
go vet ./...      # Go static analysis
```
"""


def _go_mod(project_name: str) -> str:
    return f"module {project_name}\n\ngo 1.23\n"


class GoTemplate(Template):
    """A Go project with module configuration."""

    name = "go"
    description = "Go project with module configuration"
    dependencies = ("git", "bd", "go")

    def files(self, project_name: str) -> dict[str, str]:
        """Return the files of a new Go project."""
        return {
            ".gitignore": _GITIGNORE,
            ".ubsignore": _UBSIGNORE,
            "README.md": _readme(project_name),
            "go.mod": _go_mod(project_name),
            "main.go": _MAIN_GO,
        }