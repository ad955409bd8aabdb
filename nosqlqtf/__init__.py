"""Query test framework helpers: suite and case discovery, test data, prepared statements and put request settings."""

__version__ = "0.1.0"