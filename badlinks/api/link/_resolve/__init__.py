"""Link classification and resolution."""

from .FileSystem import FileSystem
from .find_git_top_level import find_git_top_level
from .find_matching_files import find_matching_files
from .is_web_link import is_web_link
from .resolve_occurrence import DEFAULT_IMAGE_EXTENSIONS, resolve_occurrence
from .split_target import split_target

__all__ = [
    "DEFAULT_IMAGE_EXTENSIONS",
    "FileSystem",
    "find_git_top_level",
    "find_matching_files",
    "is_web_link",
    "resolve_occurrence",
    "split_target",
]
