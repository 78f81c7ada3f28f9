from __future__ import annotations

from dataclasses import dataclass, field

from goldbach_pair.adapters.prime_checker import MillerRabinPrimeChecker
from goldbach_pair.domain.reasons import NotFoundReason
from goldbach_pair.domain.results import Found, NotFound, SearchResult
from goldbach_pair.ports.prime_checker import PrimeChecker

DEFAULT_STEP_LIMIT = 5_000_000


@dataclass(frozen=True, slots=True)
class GoldbachSearcher:
    """Find the minimal symmetric prime pair around E/2.

    Displacements t are scanned in increasing order with the parity that makes
    x - t and x + t both odd: t starts at 1 when x is even and at 2 when x is
    odd, then advances by 2. When 3 divides both x and t, both endpoints are
    multiples of 3 and the candidate is skipped without querying the oracle.

    The loop only ends on a hit or once the step counter passes ``step_limit``;
    skipped candidates count as steps. No other bound exists, so inputs with no
    reachable pair (E = 4 and E = 6, where p drops below 2 immediately) run to
    the limit and report ``NotFound``.
    """

    prime_checker: PrimeChecker = field(default_factory=MillerRabinPrimeChecker)
    step_limit: int = DEFAULT_STEP_LIMIT

    def __post_init__(self) -> None:
        if self.step_limit < 0:
            raise ValueError("step_limit must be non-negative")

    def search(self, even: int) -> SearchResult:
        if even < 4 or even % 2 != 0:
            raise ValueError("search requires an even integer >= 4")

        is_prime = self.prime_checker.is_prime
        x = even // 2
        t = 1 if x % 2 == 0 else 2
        x_divisible_by_3 = x % 3 == 0
        steps = 0

        while True:
            if not (x_divisible_by_3 and t % 3 == 0):
                p = x - t
                if p > 1 and is_prime(p):
                    q = x + t
                    if is_prime(q):
                        return Found(p=p, q=q, t=t, delta=2 * t)
            t += 2
            steps += 1
            if steps > self.step_limit:
                return NotFound(reason=NotFoundReason.STEP_LIMIT_EXCEEDED, steps=steps)


def search(even: int, step_limit: int = DEFAULT_STEP_LIMIT) -> SearchResult:
    # Functional entry point with the default oracle.
    return GoldbachSearcher(step_limit=step_limit).search(even)
