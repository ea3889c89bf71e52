"""Tests for the command line interface."""

import logging
from unittest.mock import patch

from click.testing import CliRunner

from bookstore import __version__
from bookstore.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "queryBook" in result.output


def test_serve_runs_uvicorn():
    with patch("bookstore.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "4100", "--log-level", "warning"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    assert mock_run.call_args.kwargs["port"] == 4100
    assert mock_run.call_args.kwargs["log_level"] == "warning"


def test_serve_applies_log_level():
    with patch("bookstore.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--log-level", "warning"])

    assert result.exit_code == 0
    assert logging.getLogger().level == logging.WARNING
    app = mock_run.call_args.args[0]
    assert app.debug is False
