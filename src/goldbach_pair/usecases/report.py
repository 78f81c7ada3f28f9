from __future__ import annotations

import math

from goldbach_pair.domain.results import Solved

# Imaginary parts of the first fifteen non-trivial zeros of the Riemann zeta function.
# Used for display only.
RIEMANN_GAMMAS: tuple[float, ...] = (
    14.134725, 21.022040, 25.010858, 30.424876, 32.935061,
    37.586178, 40.918719, 43.327073, 48.005150, 49.773832,
    52.970321, 56.446247, 59.347044, 60.831779, 65.112545,
)


def normalized_displacement(even: int, t: int) -> float:
    # f(E) = t / (ln E)^2; math.log accepts arbitrarily large ints.
    return t / math.log(even) ** 2


def nearest_gamma(value: float) -> float:
    # Ties resolve to the first (smallest) zero.
    return min(RIEMANN_GAMMAS, key=lambda gamma: abs(value - gamma))


def build_report(solved: Solved) -> dict[str, str]:
    # Display fields for one solved value; integers stay decimal strings.
    f_norm = normalized_displacement(solved.even, solved.found.t)
    report = {"even": str(solved.even)}
    report.update(solved.pair.as_dict())
    report["f_norm"] = f"{f_norm:.6f}"
    # Shortest round-trip form, so 21.02204 prints without a padding zero.
    report["nearest_gamma"] = repr(nearest_gamma(f_norm))
    return report
