from .log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink, build_log_sink
from .prime_checker import (
    SMALL_PRIMES,
    WITNESS_BASES,
    MillerRabinPrimeChecker,
    TrialDivisionPrimeChecker,
    is_prime,
)

__all__ = [
    "JsonlLogSink",
    "MillerRabinPrimeChecker",
    "NullLogSink",
    "SMALL_PRIMES",
    "StdoutLogSink",
    "TrialDivisionPrimeChecker",
    "WITNESS_BASES",
    "build_log_sink",
    "is_prime",
]
