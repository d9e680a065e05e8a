"""Tag resolution: exact tags on a commit and the nearest ancestor tag."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from packaging.version import InvalidVersion, Version

if TYPE_CHECKING:
	from collections.abc import Iterable

	from gitversion.git.utils import GitRepoContext

logger = logging.getLogger(__name__)


def _tag_sort_key(name: str) -> tuple:
	try:
		return (1, Version(name), name)
	except InvalidVersion:
		return (0, name)


def pick_tag(names: Iterable[str]) -> str:
	"""
	Choose one tag among several that point at the same commit.

	Names that parse as versions rank above names that do not; the highest
	version wins, and the lexicographically greatest name breaks any remaining
	tie. The result does not depend on the order of ``names``.

	Args:
	    names: Candidate tag names.

	Returns:
	    The chosen tag, or an empty string when there are no candidates.
	"""
	candidates = list(names)
	if not candidates:
		return ""
	return max(candidates, key=_tag_sort_key)


class TagResolver:
	"""Looks up tags for commits of one repository."""

	def __init__(self, ctx: GitRepoContext) -> None:
		self.ctx = ctx

	def _tags_by_commit(self) -> dict[str, list[str]]:
		tags_by_commit: dict[str, list[str]] = defaultdict(list)
		for tag in self.ctx.list_tags():
			tags_by_commit[tag.commit_id].append(tag.name)
		return tags_by_commit

	def find_exact_tag(self, commit_id: str) -> str:
		"""
		Find the tag pointing exactly at ``commit_id``.

		Returns:
		    The tag name, or an empty string when the commit is not tagged.
		"""
		candidates = self._tags_by_commit().get(commit_id, [])
		if len(candidates) > 1:
			logger.debug("Commit %s has %d tags: %s", commit_id, len(candidates), ", ".join(candidates))
		return pick_tag(candidates)

	def find_nearest_ancestor_tag(self, branch: str, head: str | None = None) -> str:
		"""
		Find the first tag met while walking history back towards the root.

		The walk starts at ``head`` when given, otherwise at the tip of
		``branch``. Commits newer than ``head`` are never visited, so a
		detached HEAD behind its branch tip cannot pick up later tags.

		Args:
		    branch: Local branch whose tip starts the walk when ``head`` is not given.
		    head: Commit id to start from.

		Returns:
		    The tag name, or an empty string when no ancestor is tagged.
		"""
		start = head or self.ctx.branch_tip(branch)
		if not start:
			logger.debug("Nothing to walk for branch %r", branch)
			return ""

		tags_by_commit = self._tags_by_commit()
		if not tags_by_commit:
			return ""

		for commit in self.ctx.walk(start):
			candidates = tags_by_commit.get(str(commit.id))
			if candidates:
				tag = pick_tag(candidates)
				logger.debug("Nearest tag %s at %s", tag, commit.id)
				return tag
		return ""
