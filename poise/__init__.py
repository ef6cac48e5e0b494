"""Argument parsing, command lookup, modal reading and cooldown tracking for chat bot commands."""

__version__ = "0.1.0"