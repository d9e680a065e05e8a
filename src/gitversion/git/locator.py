"""Locate the repository control directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONTROL_DIR = ".git"
DEFAULT_SEARCH_LEVELS = 3


def _scan_for_control_dir(root: Path, control_dir: str) -> Path | None:
	"""
	Recursively scan ``root`` for a directory named ``control_dir``.

	Directories are visited top-down in sorted order, so the first match is
	the shallowest one along the sorted traversal.
	"""

	def _on_error(err: OSError) -> None:
		logger.debug("Skipping unreadable directory %s: %s", err.filename, err.strerror)

	for dirpath, dirnames, _ in os.walk(root, onerror=_on_error):
		if control_dir in dirnames:
			return Path(dirpath) / control_dir
		dirnames.sort()
	return None


def find_git_dir(
	repo_path: Path | str | None = None,
	start: Path | str | None = None,
	*,
	control_dir: str = DEFAULT_CONTROL_DIR,
	search_levels: int = DEFAULT_SEARCH_LEVELS,
) -> Path | None:
	"""
	Find the repository control directory.

	Args:
	    repo_path: Explicit repository path. Used as-is when it already names the
	        control directory, otherwise the control directory name is appended.
	    start: Directory to start auto-location from (defaults to the current directory).
	    control_dir: Name of the control directory.
	    search_levels: Number of levels to search, starting directory included.

	Returns:
	    Path to the control directory, or None when it cannot be found.
	"""
	if repo_path:
		git_dir = Path(repo_path)
		if git_dir.name != control_dir:
			git_dir = git_dir / control_dir
		logger.debug("Using explicit repository path %s", git_dir)
		return git_dir

	try:
		current = Path(start).resolve() if start else Path.cwd().resolve()
	except OSError:
		logger.exception("get current working dir")
		return None

	for _ in range(search_levels):
		logger.debug("Searching for %s under %s", control_dir, current)
		found = _scan_for_control_dir(current, control_dir)
		if found is not None:
			logger.debug("Found control directory %s", found)
			return found
		if current.parent == current:
			break
		current = current.parent

	return None
