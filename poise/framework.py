"""Framework-level helpers that prepare the command tree for dispatch."""

from __future__ import annotations

from collections.abc import Iterable

from poise.prefix import CommandNode

__all__ = ["set_qualified_names"]


def _set_subcommand_qualified_names(parents: str, commands: Iterable[CommandNode]) -> None:
    for command in commands:
        command.qualified_name = f"{parents} {command.name}"
        _set_subcommand_qualified_names(command.qualified_name, command.subcommands)


def set_qualified_names(commands: Iterable[CommandNode]) -> None:
    """Fill in ``qualified_name`` for every subcommand in the tree.

    A subcommand's qualified name is its parent's qualified name followed by
    a space and its own name. Top-level commands are left as they are; their
    plain ``name`` starts the chain of their subcommands.
    """
    for command in commands:
        _set_subcommand_qualified_names(command.name, command.subcommands)