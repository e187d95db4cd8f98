"""Config API."""

from .BadLinksConfig import BadLinksConfig
from .LogConfig import LogConfig
from .get_home_dir import get_home_dir

__all__ = ["BadLinksConfig", "LogConfig", "get_home_dir"]
