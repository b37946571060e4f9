"""Parity checks over number-word input.

A `ParityChecker` owns one read-only lexicon and answers two questions about a whitespace-delimited
string of number words:
    - is the sum of the decoded numbers even?
    - is the product of the decoded numbers even?

Both questions go through the same strict decoding step: every token must be an exact lexicon key,
and the first unknown token aborts the call with `UnrecognizedTokenError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from src.parity.schema import ParityReport
from src.parity.tokenize import split_tokens

logger = logging.getLogger(__name__)


class UnrecognizedTokenError(ValueError):
    """Raised when a token has no entry in the configured lexicon."""

    def __init__(self, token: str) -> None:
        super().__init__(f"{token} is not recognized")
        self.token = token


def _count_odd(numbers: list[int]) -> int:
    return sum(1 for n in numbers if n % 2 == 1)


def _any_even(numbers: list[int]) -> bool:
    return any(n % 2 == 0 for n in numbers)


class ParityChecker:
    """Decode number words with a fixed lexicon and report sum/product parity."""

    def __init__(self, lexicon: Mapping[str, int], *, language: str | None = None) -> None:
        # Any mapping is accepted, including an empty one.
        self._lexicon: Mapping[str, int] = MappingProxyType(dict(lexicon))
        self.language = language

    @property
    def lexicon(self) -> Mapping[str, int]:
        """Read-only view of the word -> value mapping."""

        return self._lexicon

    def sum_is_even(self, text: str) -> bool:
        """Whether the sum of the numbers in `text` is even.

        The sum is even exactly when the count of odd numbers is even. An empty input sums to 0.

        Raises:
            UnrecognizedTokenError: If a token is not a lexicon key.
        """

        return _count_odd(self._to_numbers(text)) % 2 == 0

    def product_is_even(self, text: str) -> bool:
        """Whether the product of the numbers in `text` is even.

        The empty product is 1, so an empty or whitespace-only input is odd.

        Raises:
            UnrecognizedTokenError: If a token is not a lexicon key.
        """

        return _any_even(self._to_numbers(text))

    def report(self, text: str) -> ParityReport:
        """Decode `text` once and return both parity facts."""

        numbers = self._to_numbers(text)
        return ParityReport(
            numbers=numbers,
            sum_is_even=_count_odd(numbers) % 2 == 0,
            product_is_even=_any_even(numbers),
        )

    def _to_numbers(self, text: str) -> list[int]:
        # Decode eagerly: an unknown token must fail the call even if an earlier number
        # already decides the result.
        numbers: list[int] = []
        for token in split_tokens(text):
            value = self._lexicon.get(token)
            if value is None:
                logger.debug("rejected token=%r language=%s", token, self.language)
                raise UnrecognizedTokenError(token)
            numbers.append(value)

        logger.debug("decoded tokens=%d language=%s", len(numbers), self.language)
        return numbers
