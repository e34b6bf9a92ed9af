##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Tests for the `main.py` module.
"""

import sys

import pytest
from pytest_mock import MockerFixture

from paradox import main as paradox_main
from paradox.exceptions import ConnectionNotFoundError


def test_main_without_arguments(mocker: MockerFixture, capsys):
    """
    Test that running without a command prints the help.

    Args:
        mocker: Used to patch `sys.argv`.
        capsys: Used to capture stdout.
    """
    mocker.patch.object(sys, "argv", ["paradox"])
    assert paradox_main.main() == 1
    assert "usage: paradox" in capsys.readouterr().out


def test_main_runs_command(mocker: MockerFixture, cli_config_file: str, capsys):
    """
    Test that a successful command read from `sys.argv` exits with status 0.

    Args:
        mocker: Used to patch `sys.argv` and logging setup.
        cli_config_file: Path to a configuration file.
        capsys: Used to capture stdout.
    """
    setup_logging = mocker.patch("paradox.main.setup_logging")
    mocker.patch.object(sys, "argv", ["paradox", "-lvl", "debug", "config", "--config", cli_config_file])

    with pytest.raises(SystemExit) as excinfo:
        paradox_main.main()

    assert not excinfo.value.code
    setup_logging.assert_called_once_with(logger=paradox_main.LOG, log_level="DEBUG", colors=True)
    assert "main:" in capsys.readouterr().out


def test_main_takes_explicit_arguments(mocker: MockerFixture, cli_config_file: str):
    """
    Test that arguments passed to `main` are used and `--no-color` turns colors off.

    Args:
        mocker: Used to patch `sys.argv` and logging setup.
        cli_config_file: Path to a configuration file.
    """
    setup_logging = mocker.patch("paradox.main.setup_logging")
    mocker.patch.object(sys, "argv", ["paradox"])

    with pytest.raises(SystemExit) as excinfo:
        paradox_main.main(["--no-color", "config", "--config", cli_config_file])

    assert not excinfo.value.code
    setup_logging.assert_called_once_with(logger=paradox_main.LOG, log_level="INFO", colors=False)


def test_main_reports_failures(mocker: MockerFixture, tmp_path):
    """
    Test that a missing configuration file is logged and exits with status 1.

    Args:
        mocker: Used to patch `sys.argv`, logging setup and the logger.
        tmp_path: A directory without a configuration file.
    """
    mocker.patch("paradox.main.setup_logging")
    log = mocker.patch("paradox.main.LOG")
    mocker.patch.object(sys, "argv", ["paradox", "config", "--config", str(tmp_path)])

    with pytest.raises(SystemExit) as excinfo:
        paradox_main.main()

    assert excinfo.value.code == 1
    assert "paradox.yaml" in log.error.call_args.args[0]


@pytest.mark.parametrize(
    "error, expected",
    [
        (ConnectionNotFoundError("No connection named 'nope'."), "No connection named 'nope'."),
        (RuntimeError("boom"), "Unexpected RuntimeError: boom"),
    ],
)
def test_main_error_messages(mocker: MockerFixture, error: Exception, expected: str):
    """
    Test that toolbox errors are reported as is and other errors carry their type.

    Args:
        mocker: Used to patch the configuration loader, logging setup and the logger.
        error: The error raised by the command.
        expected: The logged message.
    """
    mocker.patch("paradox.main.setup_logging")
    mocker.patch("paradox.cli.commands.config.load_config", side_effect=error)
    log = mocker.patch("paradox.main.LOG")

    with pytest.raises(SystemExit) as excinfo:
        paradox_main.main(["config"])

    assert excinfo.value.code == 1
    log.error.assert_called_once_with(expected)
