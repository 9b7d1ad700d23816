"""Read-only JSON API over sample container repositories and their images."""

__version__ = "0.1.0"
__all__ = ["repo", "resource", "server", "cli"]