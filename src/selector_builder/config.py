from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "SELECTOR_BUILDER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CliConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}; "
                f"expected one of {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> CliConfig:
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            return cls(log_level=level.upper())
        return cls()
