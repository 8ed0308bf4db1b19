"""Choose the platform-specific download of a tool and unpack its archive."""

__version__ = "0.1.0"

__all__ = ["archive", "selection"]