import pytest
import yaml

from maajise import catalog

TEMPLATE_YAML = """name: test-custom
description: A test custom template
dependencies:
  - git
files:
  README.md: |
    # {{.ProjectName}}
    Custom template test
"""


def test_builtin_templates_registered():
    for name in ("base", "go", "php", "python", "rust", "typescript"):
        template = catalog.get(name)
        assert template.name == name
        assert name in catalog.names()


def test_all_templates_matches_names():
    assert sorted(t.name for t in catalog.all_templates()) == sorted(catalog.names())


def test_get_unknown_returns_none():
    assert catalog.get("no-such-template-xyz") is None


def test_load_custom_template(tmp_path):
    path = tmp_path / "test-custom.yaml"
    path.write_text(TEMPLATE_YAML, encoding="utf-8")

    loaded = catalog.load_custom_template(path)
    assert loaded.name == "test-custom"

    template = catalog.get("test-custom")
    assert template.description == "A test custom template"
    assert template.dependencies == ("git",)
    files = template.files("my-project")
    assert "my-project" in files["README.md"]
    assert files["README.md"] == "# my-project\nCustom template test\n"


def test_load_custom_template_without_name(tmp_path):
    path = tmp_path / "nameless.yaml"
    path.write_text("description: nothing\n", encoding="utf-8")
    assert catalog.load_custom_template(path) is None


def test_load_custom_template_invalid_yaml_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("name: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        catalog.load_custom_template(path)


def test_load_custom_templates_missing_dir(tmp_path):
    assert catalog.load_custom_templates(tmp_path / "nonexistent") == []


def test_load_custom_templates_empty_dir(tmp_path):
    assert catalog.load_custom_templates(tmp_path) == []


def test_load_custom_templates_none():
    assert catalog.load_custom_templates(None) == []


def test_load_custom_templates_filters_and_skips(tmp_path):
    (tmp_path / "one.yml").write_text(
        "name: dir-loaded-one\nfiles:\n  a.txt: hi\n", encoding="utf-8"
    )
    (tmp_path / "notes.txt").write_text("name: ignored-txt\n", encoding="utf-8")
    (tmp_path / "bad.yaml").write_text("name: [unclosed\n", encoding="utf-8")
    (tmp_path / "sub.yaml").mkdir()

    loaded = catalog.load_custom_templates(tmp_path)
    assert [t.name for t in loaded] == ["dir-loaded-one"]
    assert catalog.get("dir-loaded-one").files("x") == {"a.txt": "hi"}
    assert catalog.get("ignored-txt") is None


def test_load_custom_templates_on_file_raises(tmp_path):
    path = tmp_path / "plain"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        catalog.load_custom_templates(path)


def test_default_custom_templates_dir():
    directory = str(catalog.default_custom_templates_dir())
    assert ".maajise" in directory
    assert directory.endswith("templates")