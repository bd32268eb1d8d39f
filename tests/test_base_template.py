from maajise.base_template import BaseTemplate


def test_identity():
    template = BaseTemplate()
    assert template.name == "base"
    assert template.description == "Base template (language-agnostic)"
    assert template.dependencies == ("git", "bd")


def test_file_names():
    files = BaseTemplate().files("my-app")
    assert set(files) == {".gitignore", ".ubsignore", "README.md"}


def test_readme_uses_project_name():
    readme = BaseTemplate().files("my-app")["README.md"]
    assert readme.startswith("# my-app\n")
    assert "cd my-app\n" in readme


def test_ignore_files_independent_of_project_name():
    first = BaseTemplate().files("alpha")
    second = BaseTemplate().files("beta")
    assert first[".gitignore"] == second[".gitignore"]
    assert first[".ubsignore"] == second[".ubsignore"]
    assert first["README.md"] != second["README.md"]


def test_gitignore_entries():
    gitignore = BaseTemplate().files("x")[".gitignore"]
    lines = gitignore.splitlines()
    assert "node_modules/" in lines
    assert ".env" in lines
    assert gitignore.endswith("\n")


def test_ubsignore_entries():
    ubsignore = BaseTemplate().files("x")[".ubsignore"]
    lines = ubsignore.splitlines()
    assert lines[0] == "# UBS Scanner Ignore File"
    assert ".beads/" in lines
    assert "*.md" in lines