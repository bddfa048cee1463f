import re

import pytest

from motus.charsets import DIGITS, LETTERS, SYMBOLS
from motus.generator import (
    CLASS_WEIGHTS,
    Separator,
    active_classes,
    class_distribution,
    memorable_password,
    pin_password,
    random_password,
)
from motus.rng import SeededRandom, SystemRandomSource
from motus.wordlist import WORDS

FLAGS = [(False, False), (True, False), (False, True), (True, True)]


def test_character_classes():
    assert len(LETTERS) == 52
    assert DIGITS == "0123456789"
    assert len(SYMBOLS) == 10
    assert not set(LETTERS) & set(DIGITS)
    assert not set(LETTERS) & set(SYMBOLS)
    assert not set(DIGITS) & set(SYMBOLS)


def test_weight_table_matches_classes():
    for numbers, symbols in FLAGS:
        weights = CLASS_WEIGHTS[(numbers, symbols)]
        assert len(weights) == len(active_classes(numbers, symbols))
        assert sum(weights) == 10


def test_mismatched_weights_rejected():
    with pytest.raises(ValueError):
        class_distribution(active_classes(True, True), [8, 2])
    with pytest.raises(ValueError):
        class_distribution(active_classes(False, False), [0])


@pytest.mark.parametrize("numbers,symbols", FLAGS)
def test_length(numbers, symbols):
    rng = SystemRandomSource()
    for length in (0, 1, 8, 12, 100):
        pw = random_password(rng, length, use_numbers=numbers, use_symbols=symbols)
        assert len(pw) == length


def test_zero_length_is_empty():
    rng = SeededRandom(1)
    assert random_password(rng, 0, True, True) == ""
    assert pin_password(rng, 0) == ""


def test_negative_length_raises():
    rng = SeededRandom(1)
    with pytest.raises(ValueError):
        random_password(rng, -1)
    with pytest.raises(ValueError):
        pin_password(rng, -3)


def test_letters_only_by_default():
    pw = random_password(SeededRandom(5), 500)
    assert all(c in LETTERS for c in pw)


@pytest.mark.parametrize("numbers,symbols", FLAGS)
def test_never_uses_disabled_classes(numbers, symbols):
    allowed = set("".join(active_classes(numbers, symbols)))
    pw = random_password(SeededRandom(9), 2000, use_numbers=numbers, use_symbols=symbols)
    assert set(pw) <= allowed


def test_password_is_reproducible():
    a = random_password(SeededRandom(42), 12, use_numbers=True, use_symbols=True)
    b = random_password(SeededRandom(42), 12, use_numbers=True, use_symbols=True)
    assert a == b
    assert len(a) == 12
    assert set(a) <= set(LETTERS + DIGITS + SYMBOLS)


def test_call_order_is_reproducible():
    def run():
        rng = SeededRandom(2024)
        return [
            pin_password(rng, 6),
            random_password(rng, 20, use_numbers=True),
            memorable_password(rng, 4, Separator.NUMBERS),
            random_password(rng, 20, use_symbols=True),
        ]
    assert run() == run()


def test_class_proportions():
    n = 100000
    pw = random_password(SeededRandom(42), n, use_numbers=True, use_symbols=True)
    digits = sum(1 for c in pw if c in DIGITS) / n
    symbols = sum(1 for c in pw if c in SYMBOLS) / n
    assert abs(digits - 0.20) < 0.01
    assert abs(symbols - 0.10) < 0.01


def test_pin_digits_only():
    rng = SystemRandomSource()
    for length in range(0, 30):
        pin = pin_password(rng, length)
        assert len(pin) == length
        assert all(c in DIGITS for c in pin)


def test_pin_golden_value():
    # random.Random(42), one randrange(10) per digit
    assert pin_password(SeededRandom(42), 7) == "1043321"


def test_memorable_fixed_separator():
    pw = memorable_password(SeededRandom(3), 6, Separator.HYPHEN)
    parts = pw.split("-")
    assert len(parts) == 6
    assert all(p in WORDS for p in parts)


def test_memorable_capitalize():
    pw = memorable_password(SeededRandom(3), 5, Separator.SPACE, capitalize=True)
    parts = pw.split(" ")
    assert len(parts) == 5
    assert all(p[0].isupper() and p.lower() in WORDS for p in parts)


def test_memorable_number_separators():
    pw = memorable_password(SeededRandom(11), 5, Separator.NUMBERS)
    gaps = re.findall(r"[^a-z]", pw)
    assert len(gaps) == 4
    assert all(g in DIGITS for g in gaps)
    assert all(w in WORDS for w in re.split(r"[0-9]", pw))


def test_memorable_mixed_separators():
    pw = memorable_password(SeededRandom(11), 8, "numbers-and-symbols")
    gaps = re.findall(r"[^a-z]", pw)
    assert len(gaps) == 7
    assert all(g in DIGITS + SYMBOLS for g in gaps)


def test_memorable_edge_cases():
    rng = SeededRandom(0)
    assert memorable_password(rng, 0) == ""
    assert memorable_password(rng, 1, Separator.NUMBERS) in WORDS
    with pytest.raises(ValueError):
        memorable_password(rng, -1)
    with pytest.raises(ValueError):
        memorable_password(rng, 3, "tab")


def test_word_list_is_clean():
    assert len(set(WORDS)) == len(WORDS)
    assert all(w.isalpha() and w.islower() for w in WORDS)
