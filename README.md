# maajise

A Python library for setting up project repositories: it writes a
`.gitignore`, `.ubsignore`, `README.md` and language-specific starter files
from a template, initializes Git and Beads issue tracking, makes the first
commit and can add a remote. It also reports on and validates existing
projects.

## Installation

```bash
pip install .
```

Git and the Beads `bd` program are run as external programs where they are
needed.

## Setting up a project

`maajise.project_setup.ProjectSetup` takes a `Config` and a template name.
`run()` creates `<name>/<name>` (or uses the current directory when
`in_place` is set), runs `git init`, sets `user.name` and `user.email`, runs
`bd init`, writes the template's files, commits them and offers to add an
`origin` remote. Answers to prompts are read from `input_stream` (standard
input by default).

```python
from maajise.config import default_config
from maajise.project_setup import ProjectSetup

cfg = default_config()
cfg.project_name = "my-project"
cfg.git_name = "Jane Doe"
cfg.git_email = "jane@example.com"
cfg.skip_remote = True

ProjectSetup(cfg, template="python").run()
```

`Config` also has `no_overwrite`, `skip_git`, `skip_beads`, `skip_commit`,
`skip_git_user` and `verbose`. Failures raise `maajise.command.CommandError`.

## Commands

Each command is a class with `execute(args)`, which takes command-line style
arguments and raises `CommandError` on failure. Importing a command's module
adds it to the registry in `maajise.command` (`get(name)`, `all_commands()`).

| Class | Module | Flags |
|-------|--------|-------|
| `StatusCommand` | `maajise.status_cmd` | none |
| `UpdateCommand` | `maajise.update_cmd` | `--force`, `--template=NAME`, `-v`/`--verbose`, `--dry-run`, then file names |
| `ValidateCommand` | `maajise.validate_cmd` | `-v`/`--verbose`, `--strict` |
| `TemplatesCommand` | `maajise.templates_cmd` | none |
| `DoctorCommand` | `maajise.doctor_cmd` | `-v`/`--verbose` |
| `HelpCommand` | `maajise.help_cmd` | optional command name |
| `VersionCommand` | `maajise.version_cmd` | none |

```python
from maajise.update_cmd import UpdateCommand
from maajise.validate_cmd import ValidateCommand

UpdateCommand().execute(["--dry-run"])
ValidateCommand().execute(["--strict"])
```

`status`, `update` and `validate` work on the current working directory.
`doctor` runs `git`, `bd`, `ubs` and `go` to report their versions and fails
if `git` or `bd` is missing.

## Templates

Built-in templates: `base`, `typescript`, `python`, `rust`, `php` and `go`,
available through `maajise.catalog.get(name)` and `all_templates()`.
`maajise.detect.detect_template(directory)` picks one from marker files
(`package.json`, `tsconfig.json`, `Cargo.toml`, `pyproject.toml`,
`requirements.txt`, `composer.json`, `go.mod`), falling back to `base`.

Custom templates are YAML files in `~/.maajise/templates/`, loaded when
`maajise.catalog` is imported; `load_custom_templates(directory)` loads
others:

```yaml
name: my-template
description: My own project layout
dependencies:
  - git
files:
  README.md: |
    # {{.ProjectName}}
```

`{{.ProjectName}}` in file contents is replaced with the project name.
`maajise.templating.process_template` substitutes `{{.Author}}`,
`{{.Email}}`, `{{.Year}}`, `{{.License}}` and `{{.GitHub}}` from a
`TemplateVars`.

## Configuration

`maajise.config.load_file_config()` reads `~/.maajiserc`:

```yaml
defaults:
  template: python
  git_name: Jane Doe
  git_email: jane@example.com
  main_branch: main
variables:
  author: Jane Doe
  license: MIT
templates_dir: ~/custom-templates
```

`Config.merge_file_config()` fills empty template, Git name, Git email and
main branch settings from it. `templates_dir` is only shown by `doctor`.

## What it does not do

The package installs no command-line program. There is no command that
creates a new project or adds single files and tooling to an existing one;
project creation is done from Python with `ProjectSetup`.