"""Page generators that extend the site's page collection before rendering."""

from .naming import UnsafeTagError, tag_page_name
from .registry import (
    Generator,
    GeneratorReport,
    GeneratorSpec,
    default_generators,
    run_generators,
)
from .tag_page import DuplicateTagPageError, TagPage, TagPageGenerator

__all__ = [
    "DuplicateTagPageError",
    "Generator",
    "GeneratorReport",
    "GeneratorSpec",
    "TagPage",
    "TagPageGenerator",
    "UnsafeTagError",
    "default_generators",
    "run_generators",
    "tag_page_name",
]
