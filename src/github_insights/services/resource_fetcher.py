"""Generic page-by-page fetching of list endpoints."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from github_insights.exceptions import DecodeError
from github_insights.services.github_rest_client import GitHubRestClient
from github_insights.utils.pagination import PageUrlBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """Items collected across pages, with how the collection ended."""

    items: tuple[T, ...]
    pages_requested: int
    stop_status: Optional[int] = None  # Non-success status that ended pagination

    @property
    def possibly_truncated(self) -> bool:
        """True when an error status, not an empty page, ended pagination."""
        return self.stop_status is not None


class ResourceFetcher:
    """Collects every page of a list endpoint into one ordered sequence.

    Pagination starts at page 1 and stops at the first empty page. A page
    answered with a non-success status also stops pagination, silently: the
    items accumulated so far are returned as if the data had run out, and
    only ``PagedResult.possibly_truncated`` tells the two apart. Errors raised
    while a request is in flight are not swallowed.
    """

    def __init__(
        self,
        rest_client: GitHubRestClient,
        per_page: int = 100,
        max_pages: Optional[int] = None,
    ):
        if per_page < 1:
            raise ValueError(f"per_page must be a positive integer, got {per_page}")
        if max_pages is not None and max_pages < 1:
            raise ValueError(f"max_pages must be a positive integer, got {max_pages}")
        self.rest_client = rest_client
        self.per_page = per_page
        self.max_pages = max_pages

    async def fetch_all(
        self,
        build_url: PageUrlBuilder,
        decode_item: Callable[[Any], T],
    ) -> PagedResult[T]:
        """Fetch pages until exhaustion.

        Args:
            build_url: Deterministic ``(page, per_page) -> url`` builder
            decode_item: Converts one JSON item into a model

        Returns:
            PagedResult with all items in page order

        Raises:
            TransportError: If a request could not complete
            DecodeError: If a page is not a JSON list or an item is malformed
        """
        items: list[T] = []
        page = 1

        while self.max_pages is None or page <= self.max_pages:
            url = build_url(page, self.per_page)
            response = await self.rest_client.send(url)

            if not response.is_success:
                logger.warning(
                    "Pagination stopped at page %d with status %d; returning %d items",
                    page,
                    response.status_code,
                    len(items),
                )
                return PagedResult(tuple(items), page, stop_status=response.status_code)

            data = self.rest_client.decode_json(response)
            if not isinstance(data, list):
                raise DecodeError(f"Expected a JSON list from {url}", payload=data)
            if not data:
                break

            items.extend(decode_item(item) for item in data)
            logger.debug("Page %d: %d items (total %d)", page, len(data), len(items))
            page += 1
        else:
            # max_pages reached without an empty page
            page -= 1

        return PagedResult(tuple(items), page)
