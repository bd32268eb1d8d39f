import pytest

from maajise.rust_template import RustTemplate


@pytest.fixture
def files():
    return RustTemplate().files("test-project")


def test_name():
    assert RustTemplate().name == "rust"


@pytest.mark.parametrize(
    "filename", [".gitignore", ".ubsignore", "README.md", "Cargo.toml", "src/main.rs"]
)
def test_expected_files_present(files, filename):
    assert filename in files


def test_cargo_toml_contains_project_name(files):
    assert 'name = "test-project"' in files["Cargo.toml"]
    assert 'edition = "2021"' in files["Cargo.toml"]


def test_gitignore_contains_target(files):
    assert "/target/" in files[".gitignore"]


def test_main_rs_prints_greeting(files):
    assert 'println!("Hello, Rust!");' in files["src/main.rs"]


def test_exactly_five_files(files):
    assert len(files) == 5