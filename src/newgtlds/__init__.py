"""
Keeps the new gTLD section of the public suffix list in sync with the ICANN
gTLD registry.
"""

from .version import __version__

__all__ = ["__version__"]
