"""Project template for PHP with Composer."""

from __future__ import annotations

from maajise.templating import Template

_GITIGNORE = """# PHP
/vendor/
composer.lock

# IDE
.vscode/
.idea/
*.swp
*.swo
.phpunit.result.cache

# Environment
.env
.env.local

# OS
.DS_Store
Thumbs.db

# Logs
*.log

# Cache
/cache/
"""

_UBSIGNORE = """# UBS Scanner Ignore File
vendor/
.git/
.vscode/
.idea/
.beads/
.claude/
cache/
*.md
*.json
*.lock
*.log
"""

_INDEX_PHP = """<?php

declare(strict_types=1);

echo "Hello, PHP!\\n";
"""


def _readme(project_name: str) -> str:
    return f"""# {project_name}

A PHP project.

## Setup

```bash
# Install dependencies
composer install
```

## Development

```bash
# Run the application
php src/index.php

# Run tests
composer test

# Run PHP linter
composer lint
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


def _composer_json(project_name: str) -> str:
    return f"""{{
    "name": "project/{project_name}",
    "description": "",
    "type": "project",
    "require": {{
        "php": ">=8.1"
    }},
    "require-dev": {{
        "phpunit/phpunit": "^10.0"
    }},
    "autoload": {{
        "psr-4": {{
            "App\\\\": "src/"
        }}
    }},
    "scripts": {{
        "test": "phpunit",
        "lint": "php -l src/"
    }}
}}
"""


class PHPTemplate(Template):
    """A PHP project with Composer configuration."""

    name = "php"
    description = "PHP project with Composer configuration"
    dependencies = ("git", "bd", "php", "composer")

    def files(self, project_name: str) -> dict[str, str]:
        """Return the files of a new PHP project."""
        return {
            ".gitignore": _GITIGNORE,
            ".ubsignore": _UBSIGNORE,
            "README.md": _readme(project_name),
            "composer.json": _composer_json(project_name),
            "src/index.php": _INDEX_PHP,
        }