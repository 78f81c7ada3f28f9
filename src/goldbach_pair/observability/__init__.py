from .logging import LogLevel, LogMessage, is_enabled, log_to_dict

__all__ = ["LogLevel", "LogMessage", "is_enabled", "log_to_dict"]
