"""Tests for the number-word parity checker and its strict decoding."""

from __future__ import annotations

import pytest

from src.parity.checker import ParityChecker, UnrecognizedTokenError
from src.parity.lexicons import ENGLISH, SPANISH


@pytest.fixture
def checker() -> ParityChecker:
    return ParityChecker({"one": 1, "two": 2, "three": 3})


def test_product_all_odd_is_odd(checker: ParityChecker) -> None:
    assert not checker.product_is_even("one three one three")


def test_product_one_even_is_even(checker: ParityChecker) -> None:
    assert checker.product_is_even("one three three one two")


def test_product_empty_string_is_odd() -> None:
    assert not ParityChecker({}).product_is_even("")


def test_product_whitespace_only_string_is_odd() -> None:
    assert not ParityChecker({}).product_is_even("\t\t\t")


def test_product_extra_whitespace_ignored() -> None:
    assert not ParityChecker({"one": 1}).product_is_even("one     one  ")


def test_product_unrecognized_word_raises(checker: ParityChecker) -> None:
    with pytest.raises(UnrecognizedTokenError) as exc_info:
        checker.product_is_even("one fish two fish")

    assert exc_info.value.token == "fish"
    assert str(exc_info.value) == "fish is not recognized"


def test_product_unrecognized_word_after_even_still_raises(checker: ParityChecker) -> None:
    with pytest.raises(UnrecognizedTokenError) as exc_info:
        checker.product_is_even("two fish")

    assert exc_info.value.token == "fish"


def test_first_unrecognized_token_is_reported(checker: ParityChecker) -> None:
    with pytest.raises(UnrecognizedTokenError) as exc_info:
        checker.sum_is_even("one red fish blue fish")

    assert exc_info.value.token == "red"


def test_sum_mixed_parity_even(checker: ParityChecker) -> None:
    # 1 + 2 + 3 = 6
    assert checker.sum_is_even("one two three")


def test_sum_single_odd_is_odd(checker: ParityChecker) -> None:
    assert not checker.sum_is_even("three")
    assert not checker.sum_is_even("one two")


def test_sum_evens_only_is_even(checker: ParityChecker) -> None:
    assert checker.sum_is_even("two two two")


def test_sum_empty_input_is_even() -> None:
    empty = ParityChecker({})
    assert empty.sum_is_even("")
    assert empty.sum_is_even(" \t \n ")


def test_sum_unrecognized_word_raises(checker: ParityChecker) -> None:
    with pytest.raises(UnrecognizedTokenError):
        checker.sum_is_even("one two four")


def test_tokens_match_exactly(checker: ParityChecker) -> None:
    with pytest.raises(UnrecognizedTokenError) as exc_info:
        checker.product_is_even("One")
    assert exc_info.value.token == "One"

    with pytest.raises(UnrecognizedTokenError) as exc_info:
        checker.product_is_even("one,")
    assert exc_info.value.token == "one,"


def test_whitespace_layout_does_not_change_results(checker: ParityChecker) -> None:
    compact = checker.report("one two three")
    spread = checker.report("\t one\n\ntwo   three \t")
    assert compact == spread
    assert spread.numbers == [1, 2, 3]


def test_report_combines_both_facts(checker: ParityChecker) -> None:
    report = checker.report("three one three")
    assert report.numbers == [3, 1, 3]
    assert report.sum_is_even is False
    assert report.product_is_even is False


def test_report_on_empty_input(checker: ParityChecker) -> None:
    report = checker.report("")
    assert report.numbers == []
    assert report.sum_is_even is True
    assert report.product_is_even is False


def test_checker_copies_lexicon() -> None:
    words = {"one": 1}
    checker = ParityChecker(words)
    words["two"] = 2

    with pytest.raises(UnrecognizedTokenError):
        checker.product_is_even("two")


def test_checker_lexicon_is_read_only(checker: ParityChecker) -> None:
    with pytest.raises(TypeError):
        checker.lexicon["four"] = 4  # type: ignore[index]


def test_english_and_spanish_lexicons() -> None:
    english = ParityChecker(ENGLISH, language="en")
    spanish = ParityChecker(SPANISH, language="es")

    assert english.product_is_even("three five seven ten")
    assert not spanish.product_is_even("tres cinco siete nueve")
    assert spanish.sum_is_even("uno dos tres cuatro")

    with pytest.raises(UnrecognizedTokenError):
        spanish.sum_is_even("uno two")
