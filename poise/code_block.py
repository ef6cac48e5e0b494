"""Parsing of Discord code blocks as prefix command arguments."""

from __future__ import annotations

from dataclasses import dataclass

from poise.arguments import ArgumentError

__all__ = ["CodeBlockError", "CodeBlock", "pop_code_block"]

_LANGUAGE_EXTRA_CHARS = "+-._"
_HAIR_SPACE = "\u200a"


class CodeBlockError(ArgumentError):
    """Raised when no valid code block is found."""

    message = "couldn't find a valid code block"


@dataclass(frozen=True)
class CodeBlock:
    """An inline code span or a fenced multi-line code block."""

    code: str
    language: str | None = None

    def __str__(self) -> str:
        return f"```{self.language or ''}\n{self.code}\n```"


def _is_language_ident(text: str) -> bool:
    return all(
        (c.isascii() and c.isalnum()) or c in _LANGUAGE_EXTRA_CHARS for c in text
    )


def pop_code_block(args: str) -> tuple[str, CodeBlock]:
    """Read a code block from the front of ``args``.

    Returns ``(remaining, code_block)``. The parsed code mirrors what the
    Discord client renders, including its language detection.
    """
    args = args.lstrip()

    if args.startswith("```"):
        body = args[3:]
        end = body.find("```")
        if end == -1:
            raise CodeBlockError()
        rest = body[end + 3:]
        code = body[:end]

        # A valid identifier directly after the opening fence and followed by a
        # newline is the language of the block.
        language = None
        first_newline = code.find("\n")
        if first_newline != -1 and _is_language_ident(code[:first_newline]):
            language = code[:first_newline]
            code = code[first_newline + 1:]

        # Only truly empty lines are stripped from the start and end.
        code = code.strip("\n")
    elif args.startswith("`"):
        body = args[1:]
        end = body.find("`")
        if end == -1:
            raise CodeBlockError()
        rest = body[end + 1:]
        code = body[:end]
        language = None
    else:
        raise CodeBlockError()

    if not code:
        raise CodeBlockError()

    return rest, CodeBlock(code=code.rstrip(_HAIR_SPACE), language=language)