"""dirbrowse - a minimal HTTP directory browser."""

__version__ = "0.1.0"
