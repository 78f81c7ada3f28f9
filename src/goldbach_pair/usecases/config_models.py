from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; every section has defaults.

# Hard ceiling on accepted input; the oracle's witness set is verified well past it.
SUPPORTED_MAX_EVEN = 4_000_000_000_000_000_000


class SearchConfig(BaseModel):
    # Search budget and accepted input range.
    model_config = ConfigDict(extra="forbid")
    step_limit: int = Field(default=5_000_000, gt=0)
    max_even: int = Field(default=SUPPORTED_MAX_EVEN, ge=4, le=SUPPORTED_MAX_EVEN)


class LogJsonlConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str


class LoggingConfig(BaseModel):
    # Sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "stdout"
    level: Literal["debug", "info"] = "info"
    jsonl: LogJsonlConfig | None = None

    @model_validator(mode="after")
    def _require_jsonl(self) -> LoggingConfig:
        # For jsonl sink, a jsonl section is required to avoid silent defaults.
        if self.sink == "jsonl" and self.jsonl is None:
            raise ValueError("logging.jsonl is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
