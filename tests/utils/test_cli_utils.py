"""Tests for CLI helpers and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import typer
from rich.logging import RichHandler

from gitversion.utils.cli_utils import exit_with_error, show_error
from gitversion.utils.log_setup import setup_logging


@pytest.fixture
def restore_root_logger() -> None:
	"""Put the root logger back the way the test found it."""
	root = logging.getLogger()
	level, handlers = root.level, root.handlers[:]
	yield
	for handler in root.handlers[:]:
		root.removeHandler(handler)
		if handler not in handlers:
			handler.close()
	for handler in handlers:
		root.addHandler(handler)
	root.setLevel(level)


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
	"""Root logger configuration."""

	def test_quiet_by_default(self) -> None:
		"""Only warnings and above are shown without --verbose."""
		setup_logging()
		root = logging.getLogger()
		assert root.level == logging.WARNING
		assert len(root.handlers) == 1
		assert isinstance(root.handlers[0], RichHandler)

	def test_verbose(self) -> None:
		"""--verbose enables debug output."""
		setup_logging(is_verbose=True)
		assert logging.getLogger().level == logging.DEBUG

	def test_repeated_setup_does_not_duplicate(self) -> None:
		"""Calling setup twice keeps a single console handler."""
		setup_logging()
		setup_logging()
		assert len(logging.getLogger().handlers) == 1

	def test_file_logging(self, tmp_path: Path) -> None:
		"""A log file is created, parents included."""
		log_file = tmp_path / "logs" / "gv.log"
		setup_logging(is_verbose=True, log_file_path=log_file)
		logging.getLogger("gitversion.test").debug("hello from the test")
		for handler in logging.getLogger().handlers:
			handler.flush()
		assert "hello from the test" in log_file.read_text(encoding="utf-8")
		assert any(isinstance(handler, RichHandler) for handler in logging.getLogger().handlers)


@pytest.mark.unit
class TestErrorHelpers:
	"""Error display and exit."""

	def test_show_error_includes_details(self) -> None:
		"""Exception text is appended to the summary."""
		with patch("gitversion.utils.cli_utils.display_error_summary") as mock_display:
			show_error("Failed to resolve version", ValueError("bad ref"))
		mock_display.assert_called_once()
		text = mock_display.call_args[0][0]
		assert "Failed to resolve version" in text
		assert "bad ref" in text

	def test_exit_with_error(self) -> None:
		"""The CLI exits with the requested code."""
		with patch("gitversion.utils.cli_utils.display_error_summary"), pytest.raises(typer.Exit) as excinfo:
			exit_with_error("boom", exit_code=3)
		assert excinfo.value.exit_code == 3
