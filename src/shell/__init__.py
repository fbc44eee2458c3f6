"""
Shell Module.

Interactive read loop and entry point for the MCS command line utility.
"""

from src.shell.repl import Shell

__all__ = ["Shell"]
