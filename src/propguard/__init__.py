"""PropGuard - authorization resolution and user lifecycle for property management."""

__version__ = "0.1.0"
