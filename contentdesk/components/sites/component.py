"""
Sites component - registry of external content-management sites.

A site is identified by its URL origin, so two URLs on the same origin
are the same site.
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from contentdesk.domain.entities import Site
from contentdesk.domain.errors import InvalidSiteError, SiteExistsError, SiteNotFoundError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")


def normalize_site_url(url: str) -> str:
    """Reduce a URL to its origin (scheme://host[:port])."""
    parsed = urlparse(url.strip())
    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.netloc:
        raise InvalidSiteError("Invalid URL format provided.")
    return f"{parsed.scheme}://{parsed.netloc.lower()}"


def default_site_name(origin: str) -> str:
    """'https://www.example.com' -> 'Example Site'."""
    host = urlparse(origin).hostname or origin
    if host.startswith("www."):
        host = host[len("www."):]
    label = host.split(".")[0]
    return f"{label[:1].upper()}{label[1:]} Site"


def build_site(
    url: str,
    username: str = "",
    app_password: str = "",
    name: str | None = None,
    is_virtual: bool = False,
) -> Site:
    origin = normalize_site_url(url)
    return Site(
        id=origin,
        url=origin,
        name=name or default_site_name(origin),
        username=username,
        app_password=app_password,
        is_virtual=is_virtual,
    )


def find_site(sites: list[Site], site_id: str) -> Site:
    for site in sites:
        if site.id == site_id:
            return site
    raise SiteNotFoundError(site_id)


def add_site(sites: list[Site], site: Site) -> list[Site]:
    """Return a new registry with site appended; duplicates are rejected."""
    if any(s.id == site.id for s in sites):
        raise SiteExistsError(site.id)
    logger.info("Site added: %s", site.id)
    return [*sites, site]


def remove_site(sites: list[Site], site_id: str) -> list[Site]:
    find_site(sites, site_id)
    logger.info("Site removed: %s", site_id)
    return [s for s in sites if s.id != site_id]


def update_site(sites: list[Site], site_id: str, updates: dict) -> list[Site]:
    """Apply field updates to one site (id and url are fixed)."""
    find_site(sites, site_id)
    updates = {k: v for k, v in updates.items() if k not in ("id", "url")}
    return [
        Site.model_validate({**s.model_dump(), **updates}) if s.id == site_id else s
        for s in sites
    ]
