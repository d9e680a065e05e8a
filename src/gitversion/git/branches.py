"""Find the branch that HEAD belongs to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from gitversion.git.utils import GitRepoContext, HeadInfo

logger = logging.getLogger(__name__)


class BranchResolver:
	"""Maps a commit to the local branch whose history contains it."""

	def __init__(self, ctx: GitRepoContext) -> None:
		self.ctx = ctx

	def contains(self, branch: str, commit_id: str) -> bool:
		"""Return True if ``commit_id`` is in the history of ``branch``."""
		tip = self.ctx.branch_tip(branch)
		if tip is None:
			return False
		return tip == commit_id or self.ctx.descendant_of(tip, commit_id)

	def find_branch(self, head: HeadInfo) -> str:
		"""
		Get the branch where HEAD belongs to.

		An attached HEAD names its branch directly. A detached HEAD is matched
		against local branches in name order; the first branch whose history
		contains the commit wins.

		Returns:
		    The branch name, or an empty string when no branch contains HEAD.
		"""
		if head.is_branch:
			return head.branch

		for branch in self.ctx.list_branches():
			if self.contains(branch, head.commit_id):
				logger.debug("Detached HEAD %s found on branch %s", head.commit_id, branch)
				return branch

		logger.debug("Detached HEAD %s is not on any local branch", head.commit_id)
		return ""
