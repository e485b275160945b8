"""Board-support package release tooling."""

__version__ = "0.1.0"
