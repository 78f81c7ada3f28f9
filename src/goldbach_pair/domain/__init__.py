from .arithmetic import mod_pow, split_power_of_two
from .parsing import InputParseError, check_even_domain, parse_even, parse_integer_text
from .reasons import ErrorKind, NotFoundReason
from .results import (
    Found,
    NotFound,
    Rejected,
    SearchResult,
    SolveOutcome,
    Solved,
    SolvedPair,
)

# Public domain exports keep imports explicit across layers.
__all__ = [
    "ErrorKind",
    "Found",
    "InputParseError",
    "NotFound",
    "NotFoundReason",
    "Rejected",
    "SearchResult",
    "SolveOutcome",
    "Solved",
    "SolvedPair",
    "check_even_domain",
    "mod_pow",
    "parse_even",
    "parse_integer_text",
    "split_power_of_two",
]
