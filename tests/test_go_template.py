import pytest

from maajise.go_template import GoTemplate


def test_name():
    assert GoTemplate().name == "go"
    assert GoTemplate().dependencies == ("git", "bd", "go")


@pytest.mark.parametrize(
    "filename", [".gitignore", ".ubsignore", "README.md", "go.mod", "main.go"]
)
def test_expected_files_present(filename):
    assert filename in GoTemplate().files("test-project")


def test_go_mod_contents():
    go_mod = GoTemplate().files("test-project")["go.mod"]
    assert "test-project" in go_mod
    assert "go 1.23" in go_mod
    assert go_mod.splitlines()[0] == "module test-project"


def test_main_go():
    main_go = GoTemplate().files("test-project")["main.go"]
    assert main_go.startswith("package main\n")
    assert 'fmt.Println("Hello, Go!")' in main_go


def test_readme_build_line():
    readme = GoTemplate().files("test-project")["README.md"]
    assert readme.startswith("# test-project\n")
    assert "go build -o bin/test-project ." in readme