from goldbach_pair.domain import ErrorKind, Found, NotFound, Rejected, Solved
from goldbach_pair.adapters.prime_checker import is_prime
from goldbach_pair.services.goldbach_search import GoldbachSearcher, search
from goldbach_pair.usecases.solve import SolveGoldbach, solve

__all__ = [
    "ErrorKind",
    "Found",
    "GoldbachSearcher",
    "NotFound",
    "Rejected",
    "SolveGoldbach",
    "Solved",
    "is_prime",
    "search",
    "solve",
]
