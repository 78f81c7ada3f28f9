from .goldbach_search import DEFAULT_STEP_LIMIT, GoldbachSearcher, search

__all__ = ["DEFAULT_STEP_LIMIT", "GoldbachSearcher", "search"]
