"""Command line interface and admin API client for a BigBlueSwarm cluster."""

__version__ = "1.0.0"
__all__ = ["__version__"]