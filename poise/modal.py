"""Helpers for reading submitted modal forms."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["InputText", "ActionRow", "find_modal_text"]

log = logging.getLogger(__name__)


@dataclass
class InputText:
    """A text input component of a submitted modal."""

    custom_id: str
    value: str = ""


@dataclass
class ActionRow:
    """A row of components in a submitted modal."""

    components: list[Any] = field(default_factory=list)


def find_modal_text(rows: Iterable[ActionRow], custom_id: str) -> str | None:
    """Take the value of the text input with ``custom_id`` out of the rows.

    The input's value is emptied. Returns None if the value is blank or the
    input is not found; unexpected row contents are logged as warnings.
    """
    for row in rows:
        if not row.components:
            log.warning("empty action row in modal response")
            continue
        text = row.components[0]
        if not isinstance(text, InputText):
            log.warning("unexpected non input text component in modal response")
            continue
        if text.custom_id == custom_id:
            value, text.value = text.value, ""
            return value or None
    log.warning(
        "%s not found in modal response (expected at least blank string)", custom_id
    )
    return None