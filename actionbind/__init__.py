"""Bind game actions to button and axis inputs and resolve clashing chords."""

__version__ = "0.16.0"
__all__ = ["__version__"]