"""
CLI module for the gTLD section updater.
"""

from newgtlds.cli.update import main as update_main

__all__ = ["update_main"]
