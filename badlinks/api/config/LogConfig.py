"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Unified logfile configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Lowest level written to the logfile")
