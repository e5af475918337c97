from __future__ import annotations
import re
from typing import List

from .models import SearchConfiguration

_WS = re.compile(r"\s+")


def strip_prefix(text: str, config: SearchConfiguration) -> str:
    """
    Remove one configured folder prefix from the start of the input.

    This handles the case where the user types "插件 A" (prefix "插件",
    separator " ") and the hint should search for "A".
    Rules:
      * prefixes are tried in configured order, the first match wins
      * tokens are trimmed; empty or whitespace-only tokens are skipped
      * matching is case-sensitive and exact on token + separator
      * only one layer is removed and nothing else is trimmed
    """
    separator = config.prefix_separator or " "
    for token in config.prefix_tokens:
        token = token.strip()
        if not token:
            continue
        expected = token + separator
        if text.startswith(expected):
            return text[len(expected):]
    return text


def split_words(term: str) -> List[str]:
    """Split on runs of whitespace, dropping empty pieces."""
    return [w for w in _WS.split(term) if w]
