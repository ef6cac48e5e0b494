"""Parsing of ``key=value`` prefix command arguments."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

from poise.arguments import TooFewArguments, pop_string

__all__ = ["KeyValueArgs"]

_PUNCTUATION = frozenset(string.punctuation)


def _pop_single_pair(args: str) -> tuple[str, tuple[str, str]] | None:
    """Read one ``key=value`` pair from the front of ``args``, if present."""
    if not args:
        return None

    text = args.lstrip()
    key: list[str] = []
    inside_string = False
    escaping = False

    for position, char in enumerate(text):
        if escaping:
            key.append(char)
            escaping = False
        elif not inside_string and char.isspace():
            return None
        elif char == '"':
            inside_string = not inside_string
        elif char == "\\":
            escaping = True
        elif not inside_string and char == "=":
            rest = text[position + 1:]
            break
        elif not inside_string and char in _PUNCTUATION:
            # Unquoted keys must not contain special characters, so that text
            # like "`0..=5`" is not taken for a key-value pair.
            return None
        else:
            key.append(char)
    else:
        return None

    try:
        rest, value = pop_string(rest)
    except TooFewArguments:
        value = ""
    return rest, ("".join(key), value)


@dataclass
class KeyValueArgs:
    """Key-value arguments such as ``key1=value1 key2="value 2"``."""

    pairs: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        """Return the value stored for ``key``, or None."""
        return self.pairs.get(key)

    @classmethod
    def pop_from(cls, args: str) -> tuple[str, KeyValueArgs]:
        """Read as many pairs as possible from the front of ``args``.

        Returns ``(remaining, key_value_args)``.
        """
        pairs: dict[str, str] = {}
        while (popped := _pop_single_pair(args)) is not None:
            args, (key, value) = popped
            pairs[key] = value
        return args, cls(pairs)