from __future__ import annotations

from enum import Enum


# Caller-visible error kinds returned by the solve boundary.
class ErrorKind(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    OUT_OF_DOMAIN = "OUT_OF_DOMAIN"
    TOO_LARGE = "TOO_LARGE"
    SEARCH_EXHAUSTED = "SEARCH_EXHAUSTED"


class NotFoundReason(str, Enum):
    STEP_LIMIT_EXCEEDED = "STEP_LIMIT_EXCEEDED"
