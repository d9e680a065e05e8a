"""Tests for locating the repository control directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitversion.git.locator import find_git_dir


@pytest.mark.unit
class TestExplicitPath:
	"""An explicit repository path is used without searching."""

	def test_appends_control_dir(self, tmp_path: Path) -> None:
		"""A working tree path gets .git appended."""
		assert find_git_dir(tmp_path / "project") == tmp_path / "project" / ".git"

	def test_keeps_control_dir(self, tmp_path: Path) -> None:
		"""A path that already ends in .git is kept as-is."""
		assert find_git_dir(tmp_path / "project" / ".git") == tmp_path / "project" / ".git"

	def test_no_existence_check(self, tmp_path: Path) -> None:
		"""Missing paths are returned; opening reports the failure later."""
		missing = tmp_path / "does-not-exist"
		assert find_git_dir(str(missing)) == missing / ".git"

	def test_explicit_path_wins_over_start(self, tmp_path: Path) -> None:
		"""The start directory is ignored when a repository path is given."""
		(tmp_path / "other" / ".git").mkdir(parents=True)
		assert find_git_dir(tmp_path / "project", tmp_path / "other") == tmp_path / "project" / ".git"


@pytest.mark.unit
class TestAutoLocate:
	"""Searching upward from a start directory."""

	def test_finds_control_dir_in_start(self, tmp_path: Path) -> None:
		"""The start directory's own .git is found."""
		(tmp_path / "project" / ".git").mkdir(parents=True)
		assert find_git_dir(start=tmp_path / "project") == (tmp_path / "project" / ".git").resolve()

	def test_finds_control_dir_two_levels_up(self, tmp_path: Path) -> None:
		"""The grandparent is the last level searched."""
		(tmp_path / "project" / ".git").mkdir(parents=True)
		start = tmp_path / "project" / "src" / "pkg"
		start.mkdir(parents=True)
		assert find_git_dir(start=start) == (tmp_path / "project" / ".git").resolve()

	def test_gives_up_after_three_levels(self, tmp_path: Path) -> None:
		"""A control directory three levels up is out of reach."""
		(tmp_path / "project" / ".git").mkdir(parents=True)
		start = tmp_path / "project" / "a" / "b" / "c"
		start.mkdir(parents=True)
		assert find_git_dir(start=start) is None

	def test_search_levels_is_configurable(self, tmp_path: Path) -> None:
		"""A larger search bound reaches further up."""
		(tmp_path / "project" / ".git").mkdir(parents=True)
		start = tmp_path / "project" / "a" / "b" / "c"
		start.mkdir(parents=True)
		assert find_git_dir(start=start, search_levels=4) == (tmp_path / "project" / ".git").resolve()

	def test_finds_nested_control_dir(self, tmp_path: Path) -> None:
		"""The scan descends into subdirectories."""
		(tmp_path / "workspace" / "service" / ".git").mkdir(parents=True)
		found = find_git_dir(start=tmp_path / "workspace")
		assert found == (tmp_path / "workspace" / "service" / ".git").resolve()

	def test_prefers_own_control_dir_over_nested(self, tmp_path: Path) -> None:
		"""A level's own .git is found before one in a subdirectory."""
		(tmp_path / "project" / ".git").mkdir(parents=True)
		(tmp_path / "project" / "aaa" / ".git").mkdir(parents=True)
		assert find_git_dir(start=tmp_path / "project") == (tmp_path / "project" / ".git").resolve()

	def test_ignores_control_file(self, tmp_path: Path) -> None:
		"""Only directories named .git count."""
		project = tmp_path / "project"
		project.mkdir()
		(project / ".git").write_text("gitdir: elsewhere\n")
		assert find_git_dir(start=project, search_levels=1) is None

	def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
		"""Without a start directory the current directory is used."""
		(tmp_path / "project" / ".git").mkdir(parents=True)
		monkeypatch.chdir(tmp_path / "project")
		assert find_git_dir() == (tmp_path / "project" / ".git").resolve()

	def test_custom_control_dir(self, tmp_path: Path) -> None:
		"""The control directory name comes from configuration."""
		(tmp_path / "project" / "_git").mkdir(parents=True)
		found = find_git_dir(start=tmp_path / "project", control_dir="_git")
		assert found == (tmp_path / "project" / "_git").resolve()
