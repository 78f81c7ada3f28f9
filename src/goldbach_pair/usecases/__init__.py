from .config_models import SUPPORTED_MAX_EVEN, AppConfig, LoggingConfig, SearchConfig
from .report import RIEMANN_GAMMAS, build_report, nearest_gamma, normalized_displacement
from .solve import SolveGoldbach, solve

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "RIEMANN_GAMMAS",
    "SUPPORTED_MAX_EVEN",
    "SearchConfig",
    "SolveGoldbach",
    "build_report",
    "nearest_gamma",
    "normalized_displacement",
    "solve",
]
