# Data models for the gTLD section updater

from .gtld_entry import GTLDEntry, GTLDRegistry

__all__ = [
    "GTLDEntry",
    "GTLDRegistry",
]
