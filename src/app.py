"""Application composition root.

This module wires configuration to a language lexicon and a `ParityChecker`.
"""

from __future__ import annotations

from src.config.settings import Settings
from src.parity.checker import ParityChecker
from src.parity.lexicons import get_lexicon


def create_checker(settings: Settings) -> ParityChecker:
    """Create a checker for the configured language."""

    return ParityChecker(get_lexicon(settings.language), language=settings.language)
