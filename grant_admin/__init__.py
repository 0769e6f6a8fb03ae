"""Grant admin tooling: projects and batch milestone submission."""

__version__ = "0.1.0"
