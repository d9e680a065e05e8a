"""Utility module for gitversion package."""

from .cli_utils import exit_with_error
from .config_loader import ConfigError, ConfigLoader
from .log_setup import setup_logging

__all__ = [
	"ConfigError",
	"ConfigLoader",
	"exit_with_error",
	"setup_logging",
]
