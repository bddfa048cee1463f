"""CLI for motus: generate pin, random or memorable passwords, optionally with a security report."""

import argparse
import json
import logging

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .clipboard import copy_to_clipboard
from .config import load_config
from .errors import AnalysisError, ClipboardError
from .estimator import ZxcvbnEstimator
from .generator import PasswordKind, Separator, memorable_password, pin_password, random_password
from .report import analyze, password_output, render_report
from .rng import from_seed

logger = logging.getLogger(__name__)

PIN_RANGE = (3, 12)
CHARACTERS_RANGE = (8, 100)
WORDS_RANGE = (3, 15)


def bounded_int(lo: int, hi: int, what: str):
    """argparse type accepting integers in [lo, hi]."""
    def parse(value) -> int:
        try:
            n = int(value)
        except (TypeError, ValueError):
            raise argparse.ArgumentTypeError(f"The number of {what} must be an integer")
        if not lo <= n <= hi:
            raise argparse.ArgumentTypeError(f"The number of {what} must be between {lo} and {hi}")
        return n
    return parse


validate_pin_length = bounded_int(*PIN_RANGE, "digits")
validate_character_count = bounded_int(*CHARACTERS_RANGE, "characters")
validate_word_count = bounded_int(*WORDS_RANGE, "words")


def setup_logging(verbose: bool) -> None:
    root = logging.getLogger("motus")
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _setting(parser, args, name, cfg_key, validate):
    """Command-line value if given, else the configured one (validated the same way)."""
    value = getattr(args, name)
    if value is not None:
        return value
    value = args.config[cfg_key]
    if isinstance(value, bool) or not isinstance(value, int):
        parser.error(f"invalid '{cfg_key}' in settings: expected an integer, got {value!r}")
    try:
        return validate(value)
    except argparse.ArgumentTypeError as e:
        parser.error(f"invalid '{cfg_key}' in settings: {e}")


def _flag_setting(parser, args, cfg_key) -> bool:
    value = args.config[cfg_key]
    if not isinstance(value, bool):
        parser.error(f"invalid '{cfg_key}' in settings: expected true or false, got {value!r}")
    return value


def cmd_pin(parser, args, rng) -> str:
    length = _setting(parser, args, "length", "pin_length", validate_pin_length)
    return pin_password(rng, length)


def cmd_random(parser, args, rng) -> str:
    length = _setting(parser, args, "characters", "characters", validate_character_count)
    return random_password(rng, length, use_numbers=args.use_numbers, use_symbols=args.use_symbols)


def cmd_memorable(parser, args, rng) -> str:
    words = _setting(parser, args, "words", "words", validate_word_count)
    separator = args.separator or args.config["separator"]
    try:
        separator = Separator(separator)
    except ValueError:
        parser.error(f"invalid separator: {separator!r}")
    return memorable_password(rng, words, separator=separator, capitalize=args.capitalize)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motus",
        description="Generate secure, random, and memorable passwords as well as PIN codes.",
    )
    parser.add_argument("--version", action="version", version=f"motus {__version__}")
    parser.add_argument("--no-clipboard", action="store_true",
                        help="Don't copy the generated password to the clipboard")
    parser.add_argument("-o", "--output", choices=["text", "json"], default=None,
                        help="Output format (default: text)")
    parser.add_argument("--analyze", action="store_true",
                        help="Show a security analysis of the generated password")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random source (for testing)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    pin = sub.add_parser("pin", help="Generate a random numeric PIN code")
    pin.add_argument("-n", "--numbers", dest="length", type=validate_pin_length, default=None,
                     help="Number of digits (3-12, default 7)")
    pin.set_defaults(func=cmd_pin)

    rnd = sub.add_parser("random", help="Generate a random password from letters, numbers and symbols")
    rnd.add_argument("-c", "--characters", type=validate_character_count, default=None,
                     help="Number of characters (8-100, default 16)")
    rnd.add_argument("--numbers", dest="use_numbers", action="store_true", help="Include numbers")
    rnd.add_argument("--symbols", dest="use_symbols", action="store_true", help="Include symbols")
    rnd.set_defaults(func=cmd_random)

    mem = sub.add_parser("memorable", help="Generate a passphrase from dictionary words")
    mem.add_argument("-w", "--words", type=validate_word_count, default=None,
                     help="Number of words (3-15, default 5)")
    mem.add_argument("-s", "--separator", choices=[s.value for s in Separator], default=None,
                     help="What goes between words (default: space)")
    mem.add_argument("--capitalize", action="store_true", help="Capitalize the first letter of every word")
    mem.set_defaults(func=cmd_memorable)

    return parser


def main(argv=None, estimator=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.config = load_config()
    output = args.output or args.config["output"]
    if output not in ("text", "json"):
        parser.error(f"invalid 'output' in settings: {output!r}")
    use_clipboard = _flag_setting(parser, args, "clipboard") and not args.no_clipboard
    want_analysis = _flag_setting(parser, args, "analyze") or args.analyze

    kind = PasswordKind(args.cmd)
    rng = from_seed(args.seed)
    password = args.func(parser, args, rng)
    logger.debug("generated %s password of length %d", kind.value, len(password))

    status = 0
    analysis = None
    if want_analysis:
        try:
            analysis = analyze(password, estimator or ZxcvbnEstimator())
        except AnalysisError as e:
            logger.error("security analysis failed: %s", e)
            status = 1

    console = Console()
    if output == "json":
        line = json.dumps(password_output(kind, password, analysis), ensure_ascii=False)
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
    elif analysis is not None:
        render_report(analysis, console)
    else:
        console.print(password, markup=False, highlight=False, emoji=False, soft_wrap=True)

    # the password is always printed before any clipboard attempt
    if use_clipboard:
        try:
            copy_to_clipboard(password)
        except ClipboardError as e:
            logger.warning("%s", e)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
