"""Framework-independent building blocks for web authentication."""

__version__ = "0.1.0"