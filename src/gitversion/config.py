"""Default configuration settings for the gitversion tool."""

DEFAULT_CONFIG = {
	# Version composition
	"version": {
		# Print the five-line report instead of the version token
		"show_all": False,
		# Use the branch name as reference when no ancestor tag exists
		"show_branch": False,
		# Reference used when neither a tag nor a branch applies
		"fallback_ref": "v0.0.0",
		# Number of commit id characters in a pseudo-version
		"short_id_length": 12,
		# strftime format of the commit time component
		"timestamp_format": "%Y%m%d%H%M%S",
	},
	# Repository discovery
	"locator": {
		# Name of the repository control directory
		"control_dir": ".git",
		# Directory levels searched upward from the start directory
		"search_levels": 3,
	},
	"logging": {
		# Optional log file; None disables file logging
		"file": None,
	},
}
