"""Header anchor slug tables."""

from .build_slug_table import build_slug_table
from .check_anchor import check_anchor
from .slugify_header import slugify_header, slug_variants
from .SlugTableCache import SlugTableCache

__all__ = ["SlugTableCache", "build_slug_table", "check_anchor", "slug_variants", "slugify_header"]
