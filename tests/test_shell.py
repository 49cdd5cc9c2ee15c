import os
from pathlib import Path

from shline import CommandResult, Shell


def setup_shell(**env: str) -> Shell:
    return Shell({"PATH": os.environ.get("PATH", os.defpath), **env}, capture=True)


def test_runs_program_and_captures_output():
    result = setup_shell().exec("echo hello")
    assert result.stdout == "hello\n"
    assert result.exit_code == 0
    assert result.spawned


def test_expands_variables_from_shell_env():
    result = setup_shell(NAME="world").exec('echo "hi $NAME"')
    assert result.stdout == "hi world\n"


def test_reports_exit_code():
    assert setup_shell().exec("false").exit_code == 1


def test_missing_program():
    result = setup_shell().exec("definitely-not-a-real-program-xyz")
    assert result.exit_code == 127
    assert result.stderr


def test_parse_errors_do_not_raise():
    result = setup_shell().exec('echo "abc')
    assert result.exit_code == 2
    assert "unterminated double quote" in result.stderr
    assert not result.spawned

    result = setup_shell().exec("echo $UNSET")
    assert result.exit_code == 2
    assert "UNSET" in result.stderr


def test_blank_line_is_noop():
    assert setup_shell().exec("   \n") == CommandResult()


def test_pipeline():
    result = setup_shell().exec("echo hello | wc -c")
    assert result.stdout.strip() == "6"
    assert result.exit_code == 0


def test_pipeline_missing_consumer():
    result = setup_shell().exec("echo hello | definitely-not-a-real-program-xyz")
    assert result.exit_code == 127


def test_too_many_stages():
    result = setup_shell().exec("echo a | cat | cat")
    assert result.exit_code == 2


def test_help_lists_builtins():
    out = setup_shell().exec("help").stdout
    assert "cd - Change working directory" in out
    assert "exit" in out


def test_env_builtin():
    shell = Shell({"B": "2", "A": "1"}, capture=True)
    assert shell.exec("env").stdout == "A=1\nB=2\n"


def test_exit_builtin():
    shell = setup_shell()
    assert not shell.exit_requested
    shell.exec("quit")
    assert shell.exit_requested


def test_cd_builtin(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub dir").mkdir()
    result = setup_shell().exec("cd 'sub dir'")
    assert result.exit_code == 0
    assert Path.cwd().resolve() == (tmp_path / "sub dir").resolve()


def test_cd_defaults_to_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    setup_shell(HOME=str(home)).exec("cd")
    assert Path.cwd().resolve() == home.resolve()


def test_cd_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = setup_shell().exec("cd missing")
    assert result.exit_code == 1
    assert result.stderr.startswith("cd:")


def test_allowed_commands():
    shell = Shell(allowed_commands=["echo"], capture=True)
    result = shell.exec("ls")
    assert result.exit_code == 1
    assert "disabled" in result.stderr
    assert shell.exec("ls | wc").exit_code == 1
