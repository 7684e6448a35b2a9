"""Element key normalization helpers."""

from __future__ import annotations

import re

import ftfy
from unidecode import unidecode


_MULTI_SPACE_PATTERN = re.compile(r"\s+")


def normalize_key(value: object) -> str:
    """Return a folded representation of `value` so spelling variants share a key."""

    raw = "" if value is None else str(value).strip()
    if not raw:
        return ""

    fixed = ftfy.fix_text(raw)
    ascii_friendly = unidecode(fixed).casefold()
    collapsed = _MULTI_SPACE_PATTERN.sub(" ", ascii_friendly)
    return collapsed.strip()
