from .cli import apply_overrides, build_parser, format_outcome, parse_args, run

# app package exports CLI helpers for reuse in tests and entrypoints.
__all__ = ["apply_overrides", "build_parser", "format_outcome", "parse_args", "run"]
