from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Mapping

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# environment variable -> Settings field
ENV_FIELDS = {
    "GRIDGAME_LOG_LEVEL": "log_level",
    "GRIDGAME_LOG_EVENTS": "log_events",
    "GRIDGAME_NPC_SEEK_PROBABILITY": "npc_seek_probability",
    "GRIDGAME_NPC_SEED": "npc_seed",
}

_configured = False


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = "WARNING"
    log_events: bool = True
    npc_seek_probability: float = Field(default=0.5, ge=0.0, le=1.0)
    npc_seed: int | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment (or an explicit mapping, for tests).

    Unset variables fall back to the Settings defaults; bad values raise
    pydantic's ValidationError.
    """
    env = os.environ if env is None else env
    return Settings(**{field: env[name] for name, field in ENV_FIELDS.items() if name in env})


def configure_logging(level: str = "WARNING") -> None:
    """Install a root handler once; set the package log level on every call."""
    global _configured
    if not _configured:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        _configured = True
    logging.getLogger("gridgame").setLevel(level.upper())
