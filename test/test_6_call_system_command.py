import subprocess

import pytest

from gmtfigures.utils.call_system_command import call_system_command

# ========================================= <call_system_command> =====================================


def test_return_code():
    assert call_system_command(["sh", "-c", "exit 5"], check_return_code=None, return_code=True) == 5


def test_raise_on_failure():
    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        call_system_command(["sh", "-c", "exit 2"])
    assert excinfo.value.returncode == 2


def test_no_raise_on_failure():
    assert call_system_command(["sh", "-c", "exit 2"], raise_errors=False) is None


def test_stdin_and_stdout():
    out = call_system_command(["cat"], stdin="10 20\n", return_stdout=True)
    assert out == "10 20\n"


def test_stdout_to_file(tmp_path):
    path = tmp_path / "out.txt"
    with open(path, "wb") as f:
        assert call_system_command(["sh", "-c", "echo hello"], stdout=f) is True
    assert path.read_text() == "hello\n"


def test_missing_executable(tmp_path):
    with pytest.raises(OSError):
        call_system_command([str(tmp_path / "missing")])
    assert call_system_command([str(tmp_path / "missing")], raise_errors=False) is None


def test_stdout_and_return_stdout_are_exclusive(tmp_path):
    with open(tmp_path / "out.txt", "wb") as f:
        with pytest.raises(ValueError):
            call_system_command(["true"], stdout=f, return_stdout=True)
