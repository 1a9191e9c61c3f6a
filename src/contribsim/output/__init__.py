"""Output formatting."""

from .console import ConsoleOutput, wait_for_keypress

__all__ = ["ConsoleOutput", "wait_for_keypress"]
