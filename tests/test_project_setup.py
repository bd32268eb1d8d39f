import io
import os

import pytest

from maajise.base_template import BaseTemplate
from maajise.command import CommandError
from maajise.config import Config
from maajise.project_setup import ProjectSetup
from maajise.rust_template import RustTemplate


def _setup(name="demo", template="base", stdin="", **options):
    cfg = Config(project_name=name, **options)
    return ProjectSetup(cfg, template=template, input_stream=io.StringIO(stdin))


def test_create_structure_makes_nested_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _setup("demo").create_structure()
    assert path == os.path.join("demo", "demo")
    assert (tmp_path / "demo" / "demo").is_dir()


def test_create_structure_refuses_existing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "demo").mkdir()
    with pytest.raises(CommandError, match="directory 'demo' already exists"):
        _setup("demo").create_structure()


def test_create_structure_in_place_uses_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _setup("demo", in_place=True).create_structure()
    assert path == os.getcwd()
    assert list(tmp_path.iterdir()) == []


def test_create_files_writes_template(tmp_path):
    _setup("demo", template="rust").create_files(str(tmp_path))
    expected = RustTemplate().files("demo")
    for name, content in expected.items():
        assert (tmp_path / name).read_text(encoding="utf-8") == content


def test_create_files_no_overwrite_keeps_existing(tmp_path):
    (tmp_path / ".gitignore").write_text("existing content")
    _setup("demo", no_overwrite=True).create_files(str(tmp_path))
    assert (tmp_path / ".gitignore").read_text() == "existing content"
    assert (tmp_path / "README.md").read_text() == BaseTemplate().files("demo")["README.md"]


def test_create_files_overwrites_by_default(tmp_path, capsys):
    (tmp_path / ".gitignore").write_text("existing content")
    _setup("demo").create_files(str(tmp_path))
    assert (tmp_path / ".gitignore").read_text() == BaseTemplate().files("demo")[".gitignore"]
    assert "Overwriting .gitignore" in capsys.readouterr().out


def test_create_files_unknown_template(tmp_path):
    with pytest.raises(CommandError, match="unknown template"):
        _setup("demo", template="no-such-template").create_files(str(tmp_path))


def test_configure_git_user_rejects_bad_email(tmp_path):
    setup = _setup("demo", git_name="Test User", git_email="not-an-email")
    with pytest.raises(CommandError, match="invalid email format"):
        setup.configure_git_user(str(tmp_path))


def test_configure_git_user_empty_name(tmp_path):
    setup = _setup("demo", stdin="\n")
    with pytest.raises(CommandError, match="git user.name cannot be empty"):
        setup.configure_git_user(str(tmp_path))


def test_configure_git_user_end_of_input(tmp_path):
    setup = _setup("demo", stdin="")
    with pytest.raises(CommandError, match="failed to read user name"):
        setup.configure_git_user(str(tmp_path))


def test_configure_git_user_prompted_bad_email(tmp_path):
    setup = _setup("demo", stdin="Test User\nnobody\n")
    with pytest.raises(CommandError, match="invalid email format"):
        setup.configure_git_user(str(tmp_path))


def test_configure_git_user_skipped(tmp_path, capsys):
    _setup("demo", skip_git=True, verbose=True).configure_git_user(str(tmp_path))
    assert "Skipping Git user configuration" in capsys.readouterr().out


def test_init_beads_skipped(tmp_path, capsys):
    _setup("demo", skip_beads=True, verbose=True).init_beads(str(tmp_path))
    assert "Skipping Beads (--skip-beads)" in capsys.readouterr().out
    assert not (tmp_path / ".beads").exists()


def test_initial_commit_skipped(tmp_path, capsys):
    _setup("demo", skip_commit=True, verbose=True).create_initial_commit(str(tmp_path))
    assert "Skipping initial commit" in capsys.readouterr().out


def test_remote_setup_declined(tmp_path, capsys):
    _setup("demo", stdin="n\n").setup_git_remote(str(tmp_path))
    assert "Skipped remote setup" in capsys.readouterr().out


def test_remote_setup_rejects_invalid_url(tmp_path, capsys):
    _setup("demo", stdin="y\nftp://example.com/repo.git\n").setup_git_remote(str(tmp_path))
    assert "Invalid git remote URL" in capsys.readouterr().err


def test_show_summary_mentions_project(capsys):
    _setup("demo").show_summary("somewhere")
    out = capsys.readouterr().out
    assert "Project: demo" in out
    assert "Location: somewhere" in out
    assert "cd demo/demo" in out


def test_run_without_git_creates_project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    setup = _setup("demo", skip_git=True, skip_beads=True)
    repo = setup.run()
    assert repo == os.path.join("demo", "demo")
    readme = (tmp_path / "demo" / "demo" / "README.md").read_text(encoding="utf-8")
    assert readme == BaseTemplate().files("demo")["README.md"]
    assert not (tmp_path / "demo" / "demo" / ".git").exists()