"""Whitespace tokenization for number-word input."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def split_tokens(text: str) -> list[str]:
    """Split text into tokens on runs of whitespace.

    Tokenization is intentionally literal:
        - No lowercasing.
        - No punctuation stripping.
        - Leading, trailing and repeated whitespace never yields empty tokens.

    An empty or whitespace-only string yields an empty list.
    """

    return [token for token in _WHITESPACE_RE.split(text or "") if token]
