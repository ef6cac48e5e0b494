"""Argument parsing primitives for prefix command invocations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

__all__ = [
    "ArgumentError",
    "TooManyArguments",
    "TooFewArguments",
    "MissingAttachment",
    "InvalidChoice",
    "InvalidBool",
    "pop_string",
    "pop_bool",
    "pop_attachment",
]

T = TypeVar("T")

_TRUE_WORDS = frozenset({"yes", "y", "true", "t", "1", "enable", "on"})
_FALSE_WORDS = frozenset({"no", "n", "false", "f", "0", "disable", "off"})


class ArgumentError(Exception):
    """Base class for errors raised while parsing a command argument.

    ``argument`` holds the input on which parsing failed, where there is one.
    """

    message = "Failed to parse argument"

    def __init__(self, argument: str | None = None) -> None:
        super().__init__(self.message)
        self.argument = argument

    def __str__(self) -> str:
        return self.message


class TooManyArguments(ArgumentError):
    """The user passed too many arguments to a command."""

    message = "Too many arguments were passed"


class TooFewArguments(ArgumentError):
    """The user passed too few arguments to a command."""

    message = "Too few arguments were passed"


class MissingAttachment(ArgumentError):
    """A prefix invocation carries fewer attachments than required."""

    message = "A required attachment is missing"


class InvalidChoice(ArgumentError):
    """The user entered a string that matches none of the choices."""

    message = "You entered a non-existent choice"


class InvalidBool(ArgumentError):
    """The user entered a string not recognised as a boolean."""

    message = "Expected a string like `yes` or `no` for the boolean parameter"


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def pop_string(args: str) -> tuple[str, str]:
    """Pop a whitespace-separated word off the front of ``args``.

    Double quotes group words and backslashes escape the next character.
    Leading whitespace is skipped; trailing whitespace is left in the
    returned remainder. Returns ``(remaining, word)``.
    """
    args = args.lstrip()
    if not args:
        raise TooFewArguments()

    output: list[str] = []
    inside_string = False
    escaping = False
    end = len(args)

    for position, char in enumerate(args):
        if escaping:
            output.append(char)
            escaping = False
        elif not inside_string and char.isspace():
            end = position
            break
        elif char == '"':
            inside_string = not inside_string
        elif char == "\\":
            escaping = True
        else:
            output.append(char)

    return args[end:], "".join(output)


def pop_bool(args: str) -> tuple[str, bool]:
    """Pop a boolean word such as ``yes``/``no`` or ``on``/``off``.

    Returns ``(remaining, value)`` with leading whitespace of the remainder
    trimmed.
    """
    rest, word = pop_string(args)
    normalized = _ascii_lower(word).strip()
    if normalized in _TRUE_WORDS:
        value = True
    elif normalized in _FALSE_WORDS:
        value = False
    else:
        raise InvalidBool(word)
    return rest.lstrip(), value


def pop_attachment(
    args: str, attachment_index: int, attachments: Sequence[T]
) -> tuple[str, int, T]:
    """Take the next attachment of a message.

    The text arguments are left untouched. Returns
    ``(args, next_attachment_index, attachment)``.
    """
    if not 0 <= attachment_index < len(attachments):
        raise MissingAttachment()
    return args, attachment_index + 1, attachments[attachment_index]