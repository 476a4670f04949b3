import logging
import sys

import pytest

from conda_share._src.exceptions import CommandExecutionFailed
from conda_share._src.runner import SubprocessRunner


def test_run_captures_output_and_exit_code():
    runner = SubprocessRunner(sys.executable)

    result = runner.run([
        "-c",
        "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(3)",
    ])

    assert result.stdout == b"out"
    assert result.stderr == b"err"
    assert result.exit_code == 3


def test_run_logs_command(caplog):
    caplog.set_level(logging.DEBUG, logger="conda_share._src.runner")
    runner = SubprocessRunner(sys.executable)

    runner.run(["-c", "pass"])

    assert any("exited with 0" in message for message in caplog.messages)


def test_missing_executable_raises_command_execution_failed(tmp_path):
    missing = str(tmp_path / "no-such-conda")
    runner = SubprocessRunner(missing)

    with pytest.raises(CommandExecutionFailed) as excinfo:
        runner.run(["env", "list"])

    assert excinfo.value.executable == missing
    assert isinstance(excinfo.value.cause, OSError)
