"""Git utilities for gitversion."""

from gitversion.git.branches import BranchResolver
from gitversion.git.locator import find_git_dir
from gitversion.git.tags import TagResolver, pick_tag
from gitversion.git.utils import GitError, GitRepoContext, HeadInfo, TagRef

__all__ = [
	"BranchResolver",
	"GitError",
	"GitRepoContext",
	"HeadInfo",
	"TagRef",
	"TagResolver",
	"find_git_dir",
	"pick_tag",
]
