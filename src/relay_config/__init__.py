"""Global configuration service for the TeamForge ActionHub event relay."""

__version__ = "0.1.0"
