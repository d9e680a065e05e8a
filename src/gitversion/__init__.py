"""gitversion - derive version strings from git repository metadata."""

__version__ = "0.1.0"
