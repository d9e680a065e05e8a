"""Command-line interface package for gitversion."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from gitversion import __version__
from gitversion.git import GitError, GitRepoContext, find_git_dir
from gitversion.utils.cli_utils import exit_with_error
from gitversion.utils.config_loader import ConfigError, ConfigLoader
from gitversion.utils.log_setup import setup_logging
from gitversion.version import VersionConfig, resolve_version

logger = logging.getLogger(__name__)

EXAMPLES = """Examples:

\b
    gv -r /path/to/repo/
    gv -a -r /path/to/repo/
    cd /path/to/repo/ && gv
    cd /path/to/repo/ && gv -a
"""

app = typer.Typer(
	help="Print the version of a git repository's HEAD, derived from its tags, branches and commits.",
	add_completion=False,
	context_settings={"help_option_names": ["-h", "--help"]},
)

StartArg = Annotated[
	Path | None,
	typer.Argument(
		help="Directory to start searching for the repository from (defaults to the current directory)",
		show_default=False,
	),
]

ShowAllFlag = Annotated[
	bool,
	typer.Option(
		"--all",
		"-a",
		help="Show all version information",
	),
]

ShowBranchFlag = Annotated[
	bool,
	typer.Option(
		"--branch",
		"-b",
		help="Show branch name instead of v0.0.0 when no tag is found",
	),
]

RepoOpt = Annotated[
	Path | None,
	typer.Option(
		"--repo",
		"-r",
		help="Git repository path",
	),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]

VerboseFlag = Annotated[
	bool,
	typer.Option(
		"--verbose",
		"-v",
		help="Enable verbose logging",
	),
]


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"gitversion {__version__}")
		raise typer.Exit


@app.command(epilog=EXAMPLES)
def version_command(
	start: StartArg = None,
	show_all: ShowAllFlag = False,
	show_branch: ShowBranchFlag = False,
	repo: RepoOpt = None,
	config_file: ConfigOpt = None,
	is_verbose: VerboseFlag = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Read .git for version information."""
	setup_logging(is_verbose=is_verbose)

	try:
		loader = ConfigLoader(config_file)
		log_file = loader.get("logging.file")
		config = VersionConfig.from_loader(loader, show_all=show_all, show_branch=show_branch)
		control_dir = loader.get_str("locator.control_dir", ".git")
		search_levels = loader.get_int("locator.search_levels", 3, minimum=1)
	except ConfigError as e:
		exit_with_error("Failed to load configuration", exception=e)

	if log_file:
		setup_logging(is_verbose=is_verbose, log_file_path=log_file)

	git_dir = find_git_dir(repo, start, control_dir=control_dir, search_levels=search_levels)
	if git_dir is None:
		exit_with_error(f"can not find .git dir for repo (path: {repo or start or Path.cwd()})")

	try:
		resolved = resolve_version(GitRepoContext(git_dir), config)
	except GitError as e:
		exit_with_error(f"Failed to resolve version for {git_dir}", exception=e)

	typer.echo(resolved.render(config.show_all), nl=config.show_all)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
