from __future__ import annotations

from typing import Protocol, runtime_checkable


# PrimeChecker port is the primality oracle queried by the Goldbach searcher.
@runtime_checkable
class PrimeChecker(Protocol):
    def is_prime(self, n: int) -> bool:
        """Return True if n is prime; must be deterministic and side-effect free."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("PrimeChecker is a port; use a concrete adapter.")
