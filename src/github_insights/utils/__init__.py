"""Utility modules for GitHub Insights."""

from github_insights.utils.dates import day_key, parse_day_key, parse_timestamp
from github_insights.utils.pagination import (
    PageUrlBuilder,
    build_paginated_url,
    page_url_builder,
)

__all__ = [
    "parse_timestamp",
    "day_key",
    "parse_day_key",
    "PageUrlBuilder",
    "build_paginated_url",
    "page_url_builder",
]
