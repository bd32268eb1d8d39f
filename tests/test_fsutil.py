import pytest

from maajise.fsutil import (
    dir_exists,
    ensure_dir,
    ensure_parent_dir,
    file_exists,
    path_exists,
)


def test_file_exists(tmp_path):
    assert file_exists(tmp_path / "non-existent.txt") is False
    test_file = tmp_path / "test.txt"
    test_file.write_text("test")
    assert file_exists(test_file) is True
    assert file_exists(tmp_path) is False


def test_dir_exists(tmp_path):
    assert dir_exists(tmp_path / "non-existent-dir") is False
    assert dir_exists(tmp_path) is True
    test_file = tmp_path / "test.txt"
    test_file.write_text("test")
    assert dir_exists(test_file) is False


def test_path_exists(tmp_path):
    assert path_exists(tmp_path / "non-existent") is False
    assert path_exists(tmp_path) is True
    test_file = tmp_path / "test.txt"
    test_file.write_text("test")
    assert path_exists(test_file) is True


def test_ensure_dir_new_directory(tmp_path):
    new_dir = tmp_path / "new" / "nested" / "dir"
    ensure_dir(new_dir)
    assert dir_exists(new_dir)


def test_ensure_dir_existing_directory(tmp_path):
    ensure_dir(tmp_path)
    assert dir_exists(tmp_path)


def test_ensure_dir_file_exists(tmp_path):
    file_path = tmp_path / "file-not-dir"
    file_path.write_text("test")
    with pytest.raises(FileExistsError):
        ensure_dir(file_path)


def test_ensure_parent_dir_new_parents(tmp_path):
    file_path = tmp_path / "new" / "nested" / "file.txt"
    ensure_parent_dir(file_path)
    assert dir_exists(file_path.parent)
    assert not path_exists(file_path)


def test_ensure_parent_dir_existing_parents(tmp_path):
    file_path = tmp_path / "file.txt"
    ensure_parent_dir(file_path)
    assert dir_exists(tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_ensure_parent_dir_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ensure_parent_dir("file.txt")
    assert dir_exists(".") is True
    assert path_exists("file.txt") is False
    assert list(tmp_path.iterdir()) == []


def test_ensure_parent_dir_parent_is_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(FileExistsError):
        ensure_parent_dir(blocker / "file.txt")


def test_file_vs_directory_distinction(tmp_path):
    test_file = tmp_path / "file.txt"
    test_dir = tmp_path / "testdir"
    test_file.write_text("test")
    test_dir.mkdir()
    assert file_exists(test_file)
    assert not file_exists(test_dir)
    assert dir_exists(test_dir)
    assert not dir_exists(test_file)


def test_path_exists_generic(tmp_path):
    test_file = tmp_path / "file.txt"
    test_dir = tmp_path / "testdir"
    test_file.write_text("test")
    test_dir.mkdir()
    assert path_exists(test_file)
    assert path_exists(test_dir)
    assert not path_exists(tmp_path / "non-existent")