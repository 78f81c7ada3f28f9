from __future__ import annotations

from dataclasses import dataclass

from .reasons import ErrorKind, NotFoundReason


@dataclass(frozen=True, slots=True)
class Found:
    # Symmetric pair around x = E/2: p = x - t, q = x + t, delta = q - p.
    p: int
    q: int
    t: int
    delta: int

    def __post_init__(self) -> None:
        if self.delta != 2 * self.t or self.p > self.q:
            raise ValueError("Found requires p <= q and delta == 2*t")

    @property
    def even(self) -> int:
        return self.p + self.q


@dataclass(frozen=True, slots=True)
class NotFound:
    # Search ran out of budget; steps counts every displacement advanced over.
    reason: NotFoundReason = NotFoundReason.STEP_LIMIT_EXCEEDED
    steps: int = 0


SearchResult = Found | NotFound


@dataclass(frozen=True, slots=True)
class SolvedPair:
    # Boundary payload: integers cross the boundary as decimal strings.
    p: str
    q: str
    t: str
    delta: str

    @classmethod
    def from_found(cls, found: Found) -> SolvedPair:
        return cls(p=str(found.p), q=str(found.q), t=str(found.t), delta=str(found.delta))

    def as_dict(self) -> dict[str, str]:
        return {"p": self.p, "q": self.q, "t": self.t, "delta": self.delta}


@dataclass(frozen=True, slots=True)
class Solved:
    raw: str
    even: int
    found: Found

    ok = True

    @property
    def pair(self) -> SolvedPair:
        return SolvedPair.from_found(self.found)


@dataclass(frozen=True, slots=True)
class Rejected:
    raw: str
    error: ErrorKind
    message: str

    ok = False


SolveOutcome = Solved | Rejected
