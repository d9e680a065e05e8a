"""
Configuration loader for gitversion.

This module provides functionality for loading and managing
configuration settings.

"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from xdg.BaseDirectory import xdg_config_home

from gitversion.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Constant for minimum number of parts in environment variable
MIN_ENV_VAR_PARTS = 2

ENV_PREFIX = "GITVERSION_"
LOCAL_CONFIG_NAME = ".gitversion.yml"

TRUE_VALUES = ("true", "yes", "on", "1")
FALSE_VALUES = ("false", "no", "off", "0")


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigLoader:
	"""
	Loads and manages configuration for gitversion.

	Values come from the built-in defaults, an optional YAML file and
	``GITVERSION_<SECTION>_<KEY>`` environment variables, in that order of
	precedence (last wins).

	"""

	def __init__(self, config_file: str | Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		        config_file: Path to configuration file (optional)

		"""
		self.config: dict[str, Any] = {}
		self.config_file = self._resolve_config_file(config_file)
		self.load_config()

	def _resolve_config_file(self, config_file: str | Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.gitversion.yml in the current directory
		2. $XDG_CONFIG_HOME/gitversion/config.yml

		Args:
		        config_file: Explicitly provided config file path (optional)

		Returns:
		        Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = Path(config_file).expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path

		local_config = Path(LOCAL_CONFIG_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "gitversion" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		        Dict[str, Any]: Loaded configuration

		Raises:
		        ConfigError: If configuration file exists but cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file:
			try:
				if self.config_file.exists():
					with self.config_file.open(encoding="utf-8") as f:
						file_config = yaml.safe_load(f)
					if file_config:
						if not isinstance(file_config, dict):
							msg = f"Configuration in {self.config_file} must be a mapping"
							raise ConfigError(msg)
						self._merge_configs(self.config, file_config)
					logger.debug("Loaded configuration from %s", self.config_file)
				else:
					logger.warning("Configuration file not found: %s", self.config_file)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.exception(error_msg)
				raise ConfigError(error_msg) from e

		self._apply_env_overrides()

		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
		        base: Base configuration dictionary to merge into
		        override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply environment variable overrides to configuration."""
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var.lower().split("_")[1:]
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])

			default = DEFAULT_CONFIG.get(section, {}).get(key)
			typed_value = _coerce_env_value(value, default)

			if not isinstance(self.config.get(section), dict):
				self.config[section] = {}

			self.config[section][key] = typed_value
			logger.debug("Applied environment override %s: %r", env_var, typed_value)

	def get(self, key: str, default: T = None) -> T:
		"""
		Get a configuration value, optionally with a section.

		Examples:
		        config.get("version")
		        config.get("version.show_branch")

		Args:
		        key: Configuration key, can include dots for nested access
		        default: Default value if key not found

		Returns:
		        T: Configuration value or default

		"""
		current: Any = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default

		return cast("T", current)

	def get_bool(self, key: str, default: bool = False) -> bool:
		"""
		Get a boolean configuration value.

		Accepts YAML booleans and the strings true/false, yes/no, on/off, 1/0.

		Raises:
		        ConfigError: If the value is not a boolean

		"""
		value = self.get(key, default)
		if isinstance(value, bool):
			return value
		if isinstance(value, str):
			lowered = value.strip().lower()
			if lowered in TRUE_VALUES:
				return True
			if lowered in FALSE_VALUES:
				return False
		msg = f"Invalid value for {key}: expected a boolean, got {value!r}"
		raise ConfigError(msg)

	def get_int(self, key: str, default: int, minimum: int | None = None) -> int:
		"""
		Get an integer configuration value.

		Raises:
		        ConfigError: If the value is not an integer or is below ``minimum``

		"""
		value = self.get(key, default)
		number: int | None = None
		if isinstance(value, int) and not isinstance(value, bool):
			number = value
		elif isinstance(value, str):
			try:
				number = int(value.strip())
			except ValueError:
				number = None
		if number is None:
			msg = f"Invalid value for {key}: expected an integer, got {value!r}"
			raise ConfigError(msg)
		if minimum is not None and number < minimum:
			msg = f"Invalid value for {key}: must be at least {minimum}, got {number}"
			raise ConfigError(msg)
		return number

	def get_str(self, key: str, default: str) -> str:
		"""
		Get a non-empty string configuration value.

		Numbers are accepted and converted, so ``fallback_ref: 1.0`` reads as ``"1.0"``.

		Raises:
		        ConfigError: If the value is empty or not a scalar

		"""
		value = self.get(key, default)
		if isinstance(value, bool) or not isinstance(value, str | int | float) or str(value) == "":
			msg = f"Invalid value for {key}: expected a non-empty string, got {value!r}"
			raise ConfigError(msg)
		return str(value)


def _coerce_env_value(value: str, default: Any) -> Any:
	"""Convert an environment string to the type of the default it overrides."""
	if isinstance(default, bool):
		lowered = value.strip().lower()
		if lowered in TRUE_VALUES:
			return True
		if lowered in FALSE_VALUES:
			return False
		return value
	if isinstance(default, int):
		try:
			return int(value)
		except ValueError:
			return value
	return value
