"""
Compose the version string for HEAD.

An exact tag on HEAD is the version. Otherwise a pseudo-version is built
as ``{ref}-{commit time}-{short commit id}`` where ``ref`` is the nearest
ancestor tag with its patch number bumped, the branch name when branch mode
is on, or the configured fallback (``v0.0.0``).

"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from gitversion.git.branches import BranchResolver
from gitversion.git.tags import TagResolver
from gitversion.version.models import ResolvedVersion, VersionConfig

if TYPE_CHECKING:
	from gitversion.git.utils import GitRepoContext

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"(v?)(\d+)\.(\d+)\.(\d+)")


def extract_version(tag: str, increment: bool = False) -> str:
	"""
	Extract the ``vMAJOR.MINOR.PATCH`` core from a tag name.

	Args:
	    tag: Tag name, e.g. ``v1.2.3`` or ``release-v1.2.3-rc1``.
	    increment: Bump the patch number so the result sorts after the tag.

	Returns:
	    The normalized version, or ``tag`` unchanged when it has no such core.
	"""
	match = VERSION_PATTERN.search(tag)
	if match is None:
		return tag
	major, minor, patch = (int(part) for part in match.group(2, 3, 4))
	if increment:
		patch += 1
	return f"v{major}.{minor}.{patch}"


def format_commit_time(timestamp: int, offset_minutes: int = 0, fmt: str = "%Y%m%d%H%M%S") -> str:
	"""Render a commit time with the wall clock of the committer's recorded UTC offset."""
	tz = timezone(timedelta(minutes=offset_minutes))
	return datetime.fromtimestamp(timestamp, tz=tz).strftime(fmt)


def resolve_version(ctx: GitRepoContext, config: VersionConfig | None = None) -> ResolvedVersion:
	"""
	Resolve the version of the commit at HEAD.

	Args:
	    ctx: Opened repository.
	    config: Composition options; defaults apply when omitted.

	Returns:
	    ResolvedVersion: The version and the facts it was built from.

	Raises:
	    GitError: If HEAD, tags or branches cannot be read.
	"""
	config = config or VersionConfig()
	tags = TagResolver(ctx)

	head = ctx.resolve_head()
	commit_time = format_commit_time(head.commit_time, head.commit_time_offset, config.timestamp_format)

	exact_tag = tags.find_exact_tag(head.commit_id)
	if exact_tag and not config.show_all:
		logger.debug("HEAD is tagged %s", exact_tag)
		return ResolvedVersion(
			version=exact_tag,
			commit_id=head.commit_id,
			tag=exact_tag,
			branch=head.branch,
			commit_time=commit_time,
		)

	branch = BranchResolver(ctx).find_branch(head)

	ancestor_tag = tags.find_nearest_ancestor_tag(branch, head=head.commit_id)
	if ancestor_tag:
		ref = extract_version(ancestor_tag, increment=True)
	elif config.show_branch and branch:
		ref = branch
	else:
		ref = config.fallback_ref

	version = exact_tag or f"{ref}-{commit_time}-{head.commit_id[: config.short_id_length]}"
	return ResolvedVersion(
		version=version,
		commit_id=head.commit_id,
		tag=exact_tag or ancestor_tag,
		branch=branch,
		commit_time=commit_time,
	)
