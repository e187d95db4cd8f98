"""Top-level badlinks configuration."""

import json
import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..link._resolve import DEFAULT_IMAGE_EXTENSIONS
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class BadLinksConfig(BaseModel):
    """Configuration for scans. Every field has a default."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: [".md"], description="Suffixes of scanned documents")
    ignore_dirnames: list[str] = Field(
        default_factory=lambda: [r"^\.", "node_modules"],
        description="Regexes; directories whose name matches any are not walked",
    )
    image_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_EXTENSIONS),
        description="Extensions allowed for image links (case-insensitive)",
    )
    absolute_links_root: Literal["scan_root", "git"] = Field(
        "scan_root", description="Directory that links starting with / resolve against"
    )
    batch_size: int = Field(10, gt=0, description="Documents processed per progress step")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("extensions", "image_extensions")
    @classmethod
    def _dotted(cls, value: list[str]) -> list[str]:
        return [item if item.startswith(".") else f".{item}" for item in value]

    @field_validator("ignore_dirnames")
    @classmethod
    def _compiles(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid regex {pattern!r}: {e}") from e
        return value

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on BADLINKS_HOME or default to ~/.badlinks."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "BadLinksConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected an object in {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")
