import pytest

from maajise import command
from maajise.command import CommandError
from maajise.version_cmd import VERSION, VersionCommand


def test_metadata():
    vc = VersionCommand()
    assert vc.name == "version"
    assert vc.description
    assert vc.usage
    assert len(vc.examples) > 0


def test_execute_prints_version(capsys):
    VersionCommand().execute([])
    assert VERSION == "2.0.0"
    assert capsys.readouterr().out == "Maajise version 2.0.0\n"


def test_registered():
    assert command.get("version").name == "version"


def test_unknown_flag_rejected():
    with pytest.raises(CommandError):
        VersionCommand().execute(["--bogus"])