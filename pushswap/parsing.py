"""Command-line parsing: option flags, number tokens and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class Mode(Enum):
    """Which sorting strategy to use."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"
    ADAPTIVE = "adaptive"


_MODE_FLAGS = {f"--{mode.value}": mode for mode in Mode}
_BENCH_FLAG = "--bench"


@dataclass
class Config:
    """Options taken from the leading flags of the command line."""

    mode: Mode = Mode.ADAPTIVE
    bench: bool = False


class InputError(ValueError):
    """The command line does not describe a valid list of distinct integers."""


def parse_flags(args: Sequence[str]) -> tuple[Config, list[str]]:
    """Read the leading ``--`` flags of *args*.

    Returns the resulting configuration and the arguments that follow the
    flags. An argument starting with ``--`` that is not a known flag raises
    :class:`InputError`.
    """
    config = Config()
    args = list(args)
    position = 0
    for position, arg in enumerate(args):
        if not arg.startswith("--"):
            break
        if arg == _BENCH_FLAG:
            config.bench = True
        elif arg in _MODE_FLAGS:
            config.mode = _MODE_FLAGS[arg]
        else:
            raise InputError(f"unknown option: {arg!r}")
    else:
        position = len(args)
    return config, args[position:]


def _words(s: str) -> list[str]:
    return [word for word in s.split(" ") if word]


def count_words(s: str) -> int:
    """Number of space-separated words in *s*."""
    return len(_words(s))


def collect_tokens(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and gather all the words in order.

    Raises :class:`InputError` when there are no words at all.
    """
    tokens = [word for arg in args for word in _words(arg)]
    if not tokens:
        raise InputError("no numbers given")
    return tokens


def atoi_strict(s: str) -> int:
    """Convert *s* to an integer within the 32-bit signed range.

    Accepts one optional sign followed by at least one ASCII digit and
    nothing else; anything else raises :class:`InputError`.
    """
    if not s:
        raise InputError("empty number")
    sign = -1 if s[0] == "-" else 1
    digits = s[1:] if s[0] in "+-" else s
    if not digits or not set(digits) <= _DIGITS:
        raise InputError(f"not an integer: {s!r}")
    value = sign * int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {s!r}")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def validate_and_parse(tokens: Sequence[str]) -> list[int]:
    """Convert *tokens* to integers, rejecting bad numbers and repeats."""
    if not tokens:
        raise InputError("no numbers given")
    values = [atoi_strict(token) for token in tokens]
    if has_duplicates(values):
        raise InputError("duplicate numbers")
    return values


def parse_input(args: Sequence[str]) -> tuple[Config, list[int]]:
    """Parse the arguments after the program name into options and numbers."""
    config, rest = parse_flags(args)
    return config, validate_and_parse(collect_tokens(rest))