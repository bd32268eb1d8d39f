"""Project template for Rust with Cargo."""

from __future__ import annotations

from maajise.templating import Template

_GITIGNORE = """# Rust
/target/
Cargo.lock

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
"""

_UBSIGNORE = """# UBS Scanner Ignore File
target/
.git/
.vscode/
.idea/
.beads/
.claude/
*.md
*.toml
*.lock
"""

_MAIN_RS = """fn main() {
    println!("Hello, Rust!");
}
"""


def _readme(project_name: str) -> str:
    return f"""# {project_name}

A Rust project.

## Setup

```bash
# Build the project
cargo build

# Run the project
cargo run
```

## Development

```bash
# Run in release mode
cargo run --release

# Run tests
cargo test

# Check code without building
cargo check

# Format code
cargo fmt

# Lint
cargo clippy
```

## Issue Tracking

```bash
bd list           # View issues
bd create --title "Task"  # Create issue
```

## Code Quality

```bash
ubs .             # Scan for bugs
```
"""


def _cargo_toml(project_name: str) -> str:
    return f"""[package]
name = "{project_name}"
version = "0.1.0"
edition = "2021"

[dependencies]
"""


class RustTemplate(Template):
    """A Rust project with Cargo configuration."""

    name = "rust"
    description = "Rust project with Cargo configuration"
    dependencies = ("git", "bd", "cargo", "rustc")

    def files(self, project_name: str) -> dict[str, str]:
        """Return the files of a new Rust project."""
        return {
            ".gitignore": _GITIGNORE,
            ".ubsignore": _UBSIGNORE,
            "README.md": _readme(project_name),
            "Cargo.toml": _cargo_toml(project_name),
            "src/main.rs": _MAIN_RS,
        }