"""Interactive console for browsing test results."""

from .menu import ConsoleMenu

__all__ = ["ConsoleMenu"]
