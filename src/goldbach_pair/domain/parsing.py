from __future__ import annotations

import re

from .reasons import ErrorKind


class InputParseError(ValueError):
    def __init__(self, reason: ErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason


# Separators are tolerated anywhere in the text, including between digits.
_SEPARATORS = re.compile(r"[\s,_]")
_INTEGER_PATTERN = re.compile(r"^([+-]?)([0-9]+)$")

_INVALID_MESSAGE = "Invalid input. Enter an even integer (digits only)."
_DOMAIN_MESSAGE = "E must be an even integer >= 4."


def _split_integer_text(raw: str) -> tuple[str, str]:
    # Returns (sign, digits) with leading zeros removed; digits is never empty.
    if not isinstance(raw, str):
        raise InputParseError(ErrorKind.INVALID_INPUT, "input must be text")

    match = _INTEGER_PATTERN.match(_SEPARATORS.sub("", raw))
    if match is None:
        raise InputParseError(ErrorKind.INVALID_INPUT, _INVALID_MESSAGE)
    sign, digits = match.groups()
    return sign, digits.lstrip("0") or "0"


def parse_integer_text(raw: str) -> int:
    sign, digits = _split_integer_text(raw)
    try:
        return int(sign + digits)
    except ValueError as exc:
        # int() refuses digit strings past sys.get_int_max_str_digits().
        raise InputParseError(ErrorKind.TOO_LARGE, "E is too large.") from exc


def check_even_domain(value: int, *, max_even: int) -> int:
    # Domain check runs before the size check so odd oversized input reports OUT_OF_DOMAIN.
    if value < 4 or value % 2 != 0:
        raise InputParseError(ErrorKind.OUT_OF_DOMAIN, _DOMAIN_MESSAGE)
    if value > max_even:
        raise InputParseError(ErrorKind.TOO_LARGE, f"E is too large. Max allowed is {max_even}.")
    return value


def parse_even(raw: str, *, max_even: int) -> int:
    sign, digits = _split_integer_text(raw)
    # Values with more digits than the bound are classified without converting them.
    if len(digits) > len(str(max_even)):
        if sign == "-" or int(digits[-1]) % 2 != 0:
            raise InputParseError(ErrorKind.OUT_OF_DOMAIN, _DOMAIN_MESSAGE)
        raise InputParseError(ErrorKind.TOO_LARGE, f"E is too large. Max allowed is {max_even}.")
    return check_even_domain(int(sign + digits), max_even=max_even)
