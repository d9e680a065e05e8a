"""Git repository access for gitversion, backed by pygit2."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pygit2 import Commit, Repository
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import SortMode

if TYPE_CHECKING:
	from collections.abc import Iterator

	from pygit2 import Oid, Reference

logger = logging.getLogger(__name__)

TAG_PREFIX = "refs/tags/"
BRANCH_PREFIX = "refs/heads/"
# Shortest hex object id accepted from the object store (SHA-1)
MIN_COMMIT_ID_LENGTH = 40


class GitError(Exception):
	"""Custom exception for Git-related errors."""


@dataclass(frozen=True)
class TagRef:
	"""A tag name paired with the commit it ultimately points to."""

	name: str
	commit_id: str


@dataclass(frozen=True)
class HeadInfo:
	"""Resolved state of HEAD."""

	commit_id: str
	is_branch: bool
	branch: str
	commit_time: int
	commit_time_offset: int = 0


class GitRepoContext:
	"""Read-only handle on a repository opened through pygit2."""

	def __init__(self, git_dir: Path | str) -> None:
		"""
		Open the repository whose control directory is ``git_dir``.

		Raises:
		    GitError: If the repository cannot be opened.
		"""
		self.git_dir = Path(git_dir)
		try:
			self.repo = Repository(str(self.git_dir))
		except (Pygit2GitError, KeyError, OSError) as e:
			msg = f"git open repository path {self.git_dir.parent}: {e}"
			raise GitError(msg) from e
		logger.debug("Opened repository at %s", self.repo.path)

	def resolve_head(self) -> HeadInfo:
		"""
		Resolve HEAD to its commit and, when attached, its branch.

		Returns:
		    HeadInfo: commit id, committer time and branch name (empty when detached).

		Raises:
		    GitError: If HEAD is unborn or cannot be read.
		"""
		try:
			if self.repo.head_is_unborn:
				msg = "get repository head: HEAD does not point to any commit yet"
				raise GitError(msg)
			head = self.repo.head
			commit = head.peel(Commit)
			is_branch = not self.repo.head_is_detached and head.name.startswith(BRANCH_PREFIX)
		except (Pygit2GitError, ValueError, KeyError) as e:
			msg = f"get repository head: {e}"
			raise GitError(msg) from e

		commit_id = str(commit.id)
		if len(commit_id) < MIN_COMMIT_ID_LENGTH:
			msg = f"get invalid commit ID: {commit_id!r}"
			raise GitError(msg)

		branch = head.name[len(BRANCH_PREFIX) :] if is_branch else ""
		logger.debug("HEAD at %s (branch: %s)", commit_id, branch or "<detached>")
		return HeadInfo(
			commit_id=commit_id,
			is_branch=is_branch,
			branch=branch,
			commit_time=commit.commit_time,
			commit_time_offset=commit.commit_time_offset,
		)

	def list_tags(self) -> list[TagRef]:
		"""
		List every tag peeled to its commit, ordered by reference name.

		Tags that point at something other than a commit are skipped.

		Raises:
		    GitError: If the reference store cannot be read.
		"""
		tags: list[TagRef] = []
		try:
			names = sorted(name for name in self.repo.references if name.startswith(TAG_PREFIX))
			for name in names:
				commit_id = self._peel_to_commit_id(self.repo.references[name])
				if commit_id is None:
					logger.debug("Skipping tag %s: does not point at a commit", name)
					continue
				tags.append(TagRef(name=name[len(TAG_PREFIX) :], commit_id=commit_id))
		except (Pygit2GitError, KeyError) as e:
			msg = f"get repository tags: {e}"
			raise GitError(msg) from e
		return tags

	def list_branches(self) -> list[str]:
		"""
		List local branch names in lexicographic order.

		Raises:
		    GitError: If the reference store cannot be read.
		"""
		try:
			return sorted(self.repo.branches.local)
		except Pygit2GitError as e:
			msg = f"get branches: {e}"
			raise GitError(msg) from e

	def branch_tip(self, branch: str) -> str | None:
		"""Return the commit id at the tip of a local branch, or None if it does not exist."""
		if not branch:
			return None
		try:
			ref = self.repo.branches.local.get(branch)
		except (Pygit2GitError, ValueError) as e:
			msg = f"get branch {branch}: {e}"
			raise GitError(msg) from e
		if ref is None:
			return None
		return self._peel_to_commit_id(ref)

	def walk(self, tip: str) -> Iterator[Commit]:
		"""
		Iterate the ancestry of ``tip`` newest first, each commit before its parents.

		Raises:
		    GitError: If the history cannot be read.
		"""
		try:
			yield from self.repo.walk(self._oid(tip), SortMode.TOPOLOGICAL | SortMode.TIME)
		except (Pygit2GitError, ValueError, KeyError) as e:
			msg = f"walk history from {tip}: {e}"
			raise GitError(msg) from e

	def descendant_of(self, commit_id: str, ancestor_id: str) -> bool:
		"""
		Check whether ``ancestor_id`` is reachable from ``commit_id`` through parent links.

		A commit is not its own descendant.

		Raises:
		    GitError: If either commit cannot be read.
		"""
		try:
			return self.repo.descendant_of(self._oid(commit_id), self._oid(ancestor_id))
		except (Pygit2GitError, ValueError, KeyError) as e:
			msg = f"check ancestry of {ancestor_id} from {commit_id}: {e}"
			raise GitError(msg) from e

	def _oid(self, commit_id: str) -> Oid:
		return self.repo[commit_id].id

	@staticmethod
	def _peel_to_commit_id(ref: Reference) -> str | None:
		try:
			return str(ref.peel(Commit).id)
		except (Pygit2GitError, ValueError):
			return None
