import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from errors import ConfigError

LOG_LEVEL_ENV = "PAYMENTS_LOG_LEVEL"
HALT_ON_INSUFFICIENT_FUNDS_ENV = "PAYMENTS_HALT_ON_INSUFFICIENT_FUNDS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class EngineConfig:
    log_level: str = "WARNING"
    # When False a failed withdrawal is logged and skipped instead of aborting the run.
    halt_on_insufficient_funds: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        environ = os.environ if environ is None else environ

        log_level = environ.get(LOG_LEVEL_ENV, cls.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"{LOG_LEVEL_ENV}: unknown log level {log_level!r}")

        halt = cls.halt_on_insufficient_funds
        raw_halt = environ.get(HALT_ON_INSUFFICIENT_FUNDS_ENV)
        if raw_halt is not None:
            halt = _parse_bool(HALT_ON_INSUFFICIENT_FUNDS_ENV, raw_halt)

        return cls(log_level=log_level, halt_on_insufficient_funds=halt)


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name}: expected a boolean, got {value!r}")
