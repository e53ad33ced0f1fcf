"""Vehicle emission testing simulator."""

from .utils.config import __version__

__all__ = ["__version__"]
