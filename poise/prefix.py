"""Prefix stripping and command lookup for text message invocations."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

__all__ = ["CommandNode", "CommandMatch", "PrefixOptions", "find_command", "strip_prefix"]

log = logging.getLogger(__name__)


@dataclass
class CommandNode:
    """A command in the command tree, addressed by its name or any alias."""

    name: str
    aliases: list[str] = field(default_factory=list)
    subcommands: list[CommandNode] = field(default_factory=list)
    context_menu_name: str | None = None
    qualified_name: str = ""

    def __post_init__(self) -> None:
        if not self.qualified_name:
            self.qualified_name = self.name


@dataclass(frozen=True)
class CommandMatch:
    """Result of a command lookup.

    ``invoked_name`` is the name as the user typed it, ``args`` the rest of
    the message and ``parent_commands`` the chain of enclosing commands.
    """

    command: CommandNode
    invoked_name: str
    args: str
    parent_commands: tuple[CommandNode, ...] = ()


@dataclass
class PrefixOptions:
    """How prefixes are recognised in messages.

    ``additional_prefixes`` holds literal strings or compiled patterns; a
    pattern matches only if its first match starts at the message start.
    ``dynamic_prefix`` receives the message content and returns a prefix or
    None; ``stripped_dynamic_prefix`` receives the content and returns
    ``(prefix, rest)`` or None. Exceptions raised by either are passed to
    ``on_dynamic_prefix_error``, or logged when it is not set.
    """

    prefix: str | None = None
    additional_prefixes: list[str | re.Pattern[str]] = field(default_factory=list)
    dynamic_prefix: Callable[[str], str | None] | None = None
    stripped_dynamic_prefix: Callable[[str], tuple[str, str] | None] | None = None
    on_dynamic_prefix_error: Callable[[Exception], None] | None = None
    mention_as_prefix: bool = True
    case_insensitive_commands: bool = False


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def _split_first_word(message: str) -> tuple[str, str]:
    for position, char in enumerate(message):
        if char.isspace():
            return message[:position], message[position + 1:].lstrip()
    return message, ""


def _find(
    commands: Sequence[CommandNode],
    message: str,
    case_insensitive: bool,
    parents: list[CommandNode],
) -> tuple[CommandNode, str, str] | None:
    if case_insensitive:
        def equal(a: str, b: str) -> bool:
            return _ascii_lower(a) == _ascii_lower(b)
    else:
        def equal(a: str, b: str) -> bool:
            return a == b

    command_name, rest = _split_first_word(message)

    for command in commands:
        if not equal(command.name, command_name) and not any(
            equal(alias, command_name) for alias in command.aliases
        ):
            continue
        parents.append(command)
        found = _find(command.subcommands, rest, case_insensitive, parents)
        if found is None:
            parents.pop()
            return command, command_name, rest
        return found
    return None


def find_command(
    commands: Sequence[CommandNode], remaining_message: str, case_insensitive: bool
) -> CommandMatch | None:
    """Find a command or subcommand named at the start of a prefix-less message.

    Returns None if no top-level command matches.
    """
    parents: list[CommandNode] = []
    found = _find(commands, remaining_message, case_insensitive, parents)
    if found is None:
        return None
    command, invoked_name, args = found
    return CommandMatch(command, invoked_name, args, tuple(parents))


def _report(options: PrefixOptions, error: Exception) -> None:
    if options.on_dynamic_prefix_error is not None:
        options.on_dynamic_prefix_error(error)
    else:
        log.warning("dynamic prefix callback failed: %s", error)


def _strip_mention(content: str, bot_id: object) -> str | None:
    if not content.startswith("<@"):
        return None
    rest = content[2:].lstrip("!")
    bot = str(bot_id)
    if not rest.startswith(bot):
        return None
    rest = rest[len(bot):]
    if not rest.startswith(">"):
        return None
    return rest[1:]


def strip_prefix(
    content: str, options: PrefixOptions, bot_id: object
) -> tuple[str, str] | None:
    """Strip the first matching prefix from ``content``.

    Tries, in order: the dynamic prefix, the static prefix, the additional
    prefixes, the stripped dynamic prefix and a mention of the bot. Returns
    ``(prefix, rest)`` or None if no prefix matches.
    """
    if options.dynamic_prefix is not None:
        try:
            prefix = options.dynamic_prefix(content)
        except Exception as error:  # noqa: BLE001 - reported to the caller's handler
            _report(options, error)
        else:
            if prefix is not None and content.startswith(prefix):
                return content[: len(prefix)], content[len(prefix):]

    if options.prefix is not None and content.startswith(options.prefix):
        return options.prefix, content[len(options.prefix):]

    for extra in options.additional_prefixes:
        if isinstance(extra, str):
            if content.startswith(extra):
                return extra, content[len(extra):]
        else:
            match = extra.search(content)
            if match is not None and match.start() == 0:
                return content[: match.end()], content[match.end():]

    if options.stripped_dynamic_prefix is not None:
        try:
            result = options.stripped_dynamic_prefix(content)
        except Exception as error:  # noqa: BLE001 - reported to the caller's handler
            _report(options, error)
        else:
            if result is not None:
                return result

    if options.mention_as_prefix:
        stripped = _strip_mention(content, bot_id)
        if stripped is not None:
            return content[: len(content) - len(stripped)], stripped

    return None