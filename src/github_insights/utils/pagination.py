"""Pagination utilities for GitHub API."""

from collections.abc import Callable
from functools import partial
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

# (page, per_page) -> URL
PageUrlBuilder = Callable[[int, int], str]


def build_paginated_url(base_url: str, page: int, per_page: int = 100) -> str:
    """Build a URL with pagination parameters.

    Args:
        base_url: The base URL or API path (may already have query parameters)
        page: Page number (1-indexed)
        per_page: Items per page (max 100 for most GitHub APIs)

    Returns:
        URL with page and per_page query parameters
    """
    parsed = urlparse(base_url)
    params = [
        (key, value)
        for key, value in parse_qsl(parsed.query, keep_blank_values=True)
        if key not in ("page", "per_page")
    ]
    params.append(("page", str(page)))
    params.append(("per_page", str(per_page)))

    return urlunparse(parsed._replace(query=urlencode(params)))


def page_url_builder(base_url: str) -> PageUrlBuilder:
    """Return a deterministic page-URL builder for ``base_url``."""
    return partial(build_paginated_url, base_url)
