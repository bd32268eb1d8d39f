from maajise import command
from maajise.templates_cmd import TemplatesCommand


def test_name():
    assert TemplatesCommand().name == "templates"


def test_execute_lists_templates(capsys):
    TemplatesCommand().execute([])
    output = capsys.readouterr().out
    assert "base" in output
    assert "Available templates" in output
    assert "Dependencies: [git bd]" in output


def test_templates_are_sorted(capsys):
    TemplatesCommand().execute([])
    output = capsys.readouterr().out
    positions = [output.index(f"  {name} ") for name in ("base", "go", "php", "python")]
    assert positions == sorted(positions)


def test_registered():
    assert command.get("templates").name == "templates"