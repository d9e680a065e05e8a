"""Version composition for gitversion."""

from gitversion.version.formatter import extract_version, format_commit_time, resolve_version
from gitversion.version.models import ResolvedVersion, VersionConfig

__all__ = [
	"ResolvedVersion",
	"VersionConfig",
	"extract_version",
	"format_commit_time",
	"resolve_version",
]
