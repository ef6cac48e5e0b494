"""Matching of application command interactions onto the command tree."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from poise.prefix import CommandNode

__all__ = ["OptionKind", "CommandOption", "find_matching_command"]


class OptionKind(enum.IntEnum):
    """Type of an option in application command interaction data."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11

    @property
    def is_subcommand(self) -> bool:
        """Whether this option selects a subcommand or subcommand group."""
        return self in (OptionKind.SUB_COMMAND, OptionKind.SUB_COMMAND_GROUP)


@dataclass
class CommandOption:
    """One option of received interaction data; subcommands nest their own options."""

    name: str
    kind: OptionKind
    value: Any = None
    options: list[CommandOption] = field(default_factory=list)
    focused: bool = False


def _matches(command: CommandNode, interaction_name: str) -> bool:
    return (
        interaction_name == command.name
        or interaction_name == command.context_menu_name
    )


def _find(
    interaction_name: str,
    interaction_options: Sequence[CommandOption],
    commands: Sequence[CommandNode],
    parents: list[CommandNode],
) -> tuple[CommandNode, Sequence[CommandOption]] | None:
    for command in commands:
        if not _matches(command, interaction_name):
            continue
        sub = next(
            (option for option in interaction_options if option.kind.is_subcommand),
            None,
        )
        if sub is None:
            return command, interaction_options
        parents.append(command)
        found = _find(sub.name, sub.options, command.subcommands, parents)
        if found is not None:
            return found
        parents.pop()
    return None


def find_matching_command(
    interaction_name: str,
    interaction_options: Sequence[CommandOption],
    commands: Sequence[CommandNode],
) -> tuple[CommandNode, Sequence[CommandOption], tuple[CommandNode, ...]] | None:
    """Find the command an interaction invokes, following subcommand options.

    A command matches by its name or its context menu name. Returns
    ``(command, leaf_options, parent_commands)`` or None if nothing matches.
    """
    parents: list[CommandNode] = []
    found = _find(interaction_name, interaction_options, commands, parents)
    if found is None:
        return None
    command, options = found
    return command, options, tuple(parents)