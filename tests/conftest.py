"""Global test fixtures and configuration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tests.base import GitTestBase


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
	"""
	Keep user configuration out of the tests.

	Points the XDG config home at an empty directory and drops any
	GITVERSION_* variables from the environment.
	"""
	monkeypatch.setattr("gitversion.utils.config_loader.xdg_config_home", str(tmp_path / "xdg"))
	for name in list(os.environ):
		if name.startswith("GITVERSION_"):
			monkeypatch.delenv(name)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitTestBase:
	"""An empty repository whose HEAD is the unborn branch ``main``."""
	return GitTestBase(tmp_path / "repo")
