from __future__ import annotations

from typing import Optional

from .._validators import DEFAULT_LIMIT, DateLike, date_window, validate_page
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class IndexingAPI(BaseAPI):
    """
    Crawling and search presence of a host's pages.

    History methods default to the last month; sample methods page through at
    most 100 URLs per call.
    """

    def _history(self, resource: str, date_from: Optional[DateLike], date_to: Optional[DateLike]) -> Result:
        start, end = date_window(date_from, date_to)
        return self._get(resource, {"date_from": start, "date_to": end})

    def _samples(self, resource: str, offset: int, limit: int) -> Result:
        return self._get(resource, validate_page(offset, limit))

    @shaped
    def history(
        self,
        host_id: str,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Result:
        """Pages downloaded by the crawler, grouped by HTTP status."""
        return self._history(f"/hosts/{path_id(host_id, 'host_id')}/indexing/history/", date_from, date_to)

    @shaped
    def samples(self, host_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Result:
        return self._samples(f"/hosts/{path_id(host_id, 'host_id')}/indexing/samples/", offset, limit)

    @shaped
    def in_search_history(
        self,
        host_id: str,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Result:
        """Number of pages in search over time."""
        return self._history(
            f"/hosts/{path_id(host_id, 'host_id')}/search-urls/in-search/history/", date_from, date_to
        )

    @shaped
    def in_search_samples(self, host_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Result:
        return self._samples(f"/hosts/{path_id(host_id, 'host_id')}/search-urls/in-search/samples/", offset, limit)

    @shaped
    def events_history(
        self,
        host_id: str,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Result:
        """Pages that appeared in or were excluded from search."""
        return self._history(f"/hosts/{path_id(host_id, 'host_id')}/search-urls/events/history/", date_from, date_to)

    @shaped
    def events_samples(self, host_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Result:
        return self._samples(f"/hosts/{path_id(host_id, 'host_id')}/search-urls/events/samples/", offset, limit)
