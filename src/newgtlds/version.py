"""
Version constants for the gTLD section updater.
"""

# Package version, read by pyproject.toml at build time
__version__ = "1.0.0"
