"""Models for version resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitversion.config import DEFAULT_CONFIG

if TYPE_CHECKING:
	from gitversion.utils.config_loader import ConfigLoader

_VERSION_DEFAULTS = DEFAULT_CONFIG["version"]


@dataclass(frozen=True)
class VersionConfig:
	"""Options controlling how the version string is composed."""

	show_all: bool = False
	show_branch: bool = False
	fallback_ref: str = _VERSION_DEFAULTS["fallback_ref"]
	short_id_length: int = _VERSION_DEFAULTS["short_id_length"]
	timestamp_format: str = _VERSION_DEFAULTS["timestamp_format"]

	@classmethod
	def from_loader(
		cls,
		loader: ConfigLoader,
		*,
		show_all: bool = False,
		show_branch: bool = False,
	) -> VersionConfig:
		"""
		Build the options from loaded configuration and command-line flags.

		A flag can only switch its option on; configuration decides otherwise.

		Raises:
		    ConfigError: If a configured value has the wrong type.
		"""
		return cls(
			show_all=show_all or loader.get_bool("version.show_all"),
			show_branch=show_branch or loader.get_bool("version.show_branch"),
			fallback_ref=loader.get_str("version.fallback_ref", cls.fallback_ref),
			short_id_length=loader.get_int("version.short_id_length", cls.short_id_length, minimum=1),
			timestamp_format=loader.get_str("version.timestamp_format", cls.timestamp_format),
		)


@dataclass
class ResolvedVersion:
	"""Everything known about the version at HEAD."""

	version: str
	commit_id: str
	tag: str = ""
	branch: str = ""
	commit_time: str = ""

	def render(self, show_all: bool = False) -> str:
		"""Render the version token, or the five-line report when ``show_all`` is set."""
		if not show_all:
			return self.version
		return "\n".join(
			[
				f"Version: {self.version}",
				f"Tag: {self.tag}",
				f"Branch: {self.branch}",
				f"CommitTime: {self.commit_time}",
				f"CommitID: {self.commit_id}",
			]
		)
