"""
Library component - Filter/query views over the content library.
"""

from .component import UNKNOWN_AUTHOR, StatusFilter, TypeFilter, author_labels, query
from .ports import GenerationKind, GeneratorPort

__all__ = [
    "UNKNOWN_AUTHOR",
    "GenerationKind",
    "GeneratorPort",
    "StatusFilter",
    "TypeFilter",
    "author_labels",
    "query",
]
