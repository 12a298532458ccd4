import os
import stat

import pytest

from pipechain.commands import Command, create_commands, format_commands, parse_command


@pytest.fixture
def bindir(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(tool, stat.S_IRWXU)
    return tmp_path


def test_parse_command_splits_on_spaces(bindir):
    command = parse_command("tool  -l   -a", {"PATH": str(bindir)})
    assert command.argv == ["tool", "-l", "-a"]
    assert command.path == f"{bindir}/tool"
    assert command.pid is None


def test_parse_command_without_path_variable():
    command = parse_command("tool x", {})
    assert command.argv == ["tool", "x"]
    assert command.path is None


def test_parse_command_unresolved_keeps_name(bindir):
    command = parse_command("other", {"PATH": str(bindir)})
    assert command.path == "other"


@pytest.mark.parametrize("spec", ["", "   "])
def test_parse_command_rejects_empty(spec):
    with pytest.raises(ValueError):
        parse_command(spec, {"PATH": "/bin"})


def test_create_commands_preserves_order(bindir):
    env = [f"PATH={bindir}"]
    commands = create_commands(["tool a", "other b", "tool c"], env)
    assert [c.argv for c in commands] == [["tool", "a"], ["other", "b"], ["tool", "c"]]
    assert [c.path for c in commands] == [f"{bindir}/tool", "other", f"{bindir}/tool"]


def test_format_commands_lists_name_and_path():
    text = format_commands([Command(["cat"], "/bin/cat"), Command(["wc", "-l"], "/bin/wc")])
    assert text == "\ncat\n/bin/cat\n\nwc\n/bin/wc\n"


def test_format_commands_missing_path_prints_null():
    assert format_commands([Command(["cat"], None)]) == "\ncat\n(null)\n"


def test_format_commands_empty():
    assert format_commands([]) == ""