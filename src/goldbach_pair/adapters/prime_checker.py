from __future__ import annotations

import math
from dataclasses import dataclass

from goldbach_pair.domain.arithmetic import mod_pow, split_power_of_two
from goldbach_pair.ports.prime_checker import PrimeChecker

# Cheap rejection filter applied before any strong-probable-prime round.
SMALL_PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)

# The first seven bases alone are only deterministic below 341_550_071_728_321;
# the full first-twelve-primes set is deterministic below 318_665_857_834_031_151_167_461.
WITNESS_BASES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(n: int) -> bool:
    if n < 2:
        return False

    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    d, s = split_power_of_two(n - 1)
    for a in WITNESS_BASES:
        if not _passes_witness(a, d, s, n):
            return False
    return True


def _passes_witness(a: int, d: int, s: int, n: int) -> bool:
    # a == 0 (mod n) would reduce every power to 0 and wrongly flag n composite.
    if a % n == 0:
        return True
    x = mod_pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = (x * x) % n
        if x == n - 1:
            return True
    return False


@dataclass(frozen=True, slots=True)
class MillerRabinPrimeChecker(PrimeChecker):
    # Production oracle: small-prime filter plus deterministic Miller-Rabin.
    def is_prime(self, n: int) -> bool:
        return is_prime(n)


@dataclass(frozen=True, slots=True)
class TrialDivisionPrimeChecker(PrimeChecker):
    # Naive reference oracle; only practical for small n.
    def is_prime(self, n: int) -> bool:
        return _is_prime_trial_division(n)


def _is_prime_trial_division(n: int) -> bool:
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    limit = int(math.isqrt(n))
    for d in range(3, limit + 1, 2):
        if n % d == 0:
            return False
    return True
