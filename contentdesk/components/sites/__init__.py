"""
Sites component - Content-management site registry.
"""

from .component import (
    add_site,
    build_site,
    default_site_name,
    find_site,
    normalize_site_url,
    remove_site,
    update_site,
)

__all__ = [
    "add_site",
    "build_site",
    "default_site_name",
    "find_site",
    "normalize_site_url",
    "remove_site",
    "update_site",
]
