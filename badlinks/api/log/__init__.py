"""Log module - unified logfile."""

from .append_log import append_log

__all__ = ["append_log"]
