"""
motus.generator
Password, PIN and passphrase generators. Every generator takes the random
source as its first argument and keeps no state between calls.
"""

import enum
import logging
from typing import Dict, List, Tuple

from .charsets import DIGITS, LETTERS, SYMBOLS
from .rng import RandomSource, WeightedIndex
from .wordlist import WORDS

logger = logging.getLogger(__name__)

# (use_numbers, use_symbols) -> relative weight per active class, in
# LETTERS, DIGITS, SYMBOLS order with disabled classes left out.
CLASS_WEIGHTS: Dict[Tuple[bool, bool], Tuple[int, ...]] = {
    (False, False): (10,),
    (True, False): (8, 2),
    (False, True): (8, 2),
    (True, True): (7, 2, 1),
}


class PasswordKind(enum.Enum):
    PIN = "pin"
    RANDOM = "random"
    MEMORABLE = "memorable"


class Separator(enum.Enum):
    SPACE = "space"
    COMMA = "comma"
    HYPHEN = "hyphen"
    PERIOD = "period"
    UNDERSCORE = "underscore"
    NUMBERS = "numbers"
    NUMBERS_AND_SYMBOLS = "numbers-and-symbols"


_FIXED_SEPARATORS = {
    Separator.SPACE: " ",
    Separator.COMMA: ",",
    Separator.HYPHEN: "-",
    Separator.PERIOD: ".",
    Separator.UNDERSCORE: "_",
}


def _check_length(length: int, name: str = "length") -> None:
    if length < 0:
        raise ValueError(f"{name} must be >= 0")


def active_classes(use_numbers: bool, use_symbols: bool) -> List[str]:
    classes = [LETTERS]
    if use_numbers:
        classes.append(DIGITS)
    if use_symbols:
        classes.append(SYMBOLS)
    return classes


def class_distribution(classes: List[str], weights) -> WeightedIndex:
    """Build the class distribution, rejecting weights that don't fit `classes`."""
    dist = WeightedIndex(weights)
    if len(dist) != len(classes):
        raise ValueError(
            f"got {len(dist)} weights for {len(classes)} character classes"
        )
    return dist


def random_password(
    rng: RandomSource,
    length: int,
    use_numbers: bool = False,
    use_symbols: bool = False,
) -> str:
    """
    Draw `length` characters independently: a character class is picked by
    weight, then a character uniformly inside that class. Letters are always
    in play; digits and symbols only when enabled. Nothing forces every
    enabled class to appear.
    """
    _check_length(length)
    classes = active_classes(use_numbers, use_symbols)
    dist = class_distribution(classes, CLASS_WEIGHTS[(bool(use_numbers), bool(use_symbols))])
    logger.debug(
        "random password: length=%d numbers=%s symbols=%s weights=%s",
        length, use_numbers, use_symbols, dist.weights,
    )

    chars = []
    for _ in range(length):
        pool = classes[rng.choose_weighted(dist)]
        chars.append(pool[rng.randbelow(len(pool))])
    return "".join(chars)


def pin_password(rng: RandomSource, length: int) -> str:
    """Numeric PIN of `length` uniformly drawn digits."""
    _check_length(length)
    logger.debug("pin: length=%d", length)
    return "".join(DIGITS[rng.randbelow(len(DIGITS))] for _ in range(length))


def memorable_password(
    rng: RandomSource,
    words: int = 5,
    separator: Separator = Separator.SPACE,
    capitalize: bool = False,
) -> str:
    """
    Passphrase of `words` entries from the built-in word list. Numeric and
    mixed separators draw a fresh character for every gap.
    """
    _check_length(words, "words")
    separator = Separator(separator)
    logger.debug(
        "memorable password: words=%d separator=%s capitalize=%s",
        words, separator.value, capitalize,
    )

    picked = [rng.choice(WORDS) for _ in range(words)]
    if capitalize:
        picked = [w.capitalize() for w in picked]
    if not picked:
        return ""

    if separator in _FIXED_SEPARATORS:
        return _FIXED_SEPARATORS[separator].join(picked)

    gap_pool = DIGITS if separator is Separator.NUMBERS else DIGITS + SYMBOLS
    out = [picked[0]]
    for w in picked[1:]:
        out.append(rng.choice(gap_pool))
        out.append(w)
    return "".join(out)
