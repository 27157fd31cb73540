from __future__ import annotations

from typing import Optional, Sequence

from .._validators import DateLike, optional_date_range, require, validate_page
from ..models import Result
from ._base import BaseAPI, path_id, shaped

POPULAR_MAX_LIMIT = 500


class QueriesAPI(BaseAPI):
    """
    Search query statistics.

    Indicators select the metrics to return: TOTAL_SHOWS, TOTAL_CLICKS,
    AVG_SHOW_POSITION, AVG_CLICK_POSITION. Device type indicators narrow them
    down to ALL, DESKTOP, MOBILE_AND_TABLET, MOBILE or TABLET. Dates are
    optional here; when omitted the service uses its own default window.
    """

    @shaped
    def popular(
        self,
        host_id: str,
        order_by: str = "TOTAL_CLICKS",
        query_indicators: Sequence[str] = (),
        device_type_indicators: Sequence[str] = (),
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        offset: int = 0,
        limit: int = POPULAR_MAX_LIMIT,
    ) -> Result:
        """Top popular queries, ordered by TOTAL_CLICKS or TOTAL_SHOWS."""
        host = path_id(host_id, 'host_id')
        params = validate_page(offset, limit, max_limit=POPULAR_MAX_LIMIT)
        return self._get(
            f"/hosts/{host}/search-queries/popular/",
            {
                "order_by": require(order_by, "order_by"),
                "query_indicator": list(query_indicators),
                "device_type_indicator": list(device_type_indicators),
                **optional_date_range(date_from, date_to),
                **params,
            },
        )

    @shaped
    def all_history(
        self,
        host_id: str,
        query_indicators: Sequence[str] = (),
        device_type_indicators: Sequence[str] = (),
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Result:
        """Totals over all search queries."""
        host = path_id(host_id, 'host_id')
        return self._get(
            f"/hosts/{host}/search-queries/all/history/",
            {
                "query_indicator": list(query_indicators),
                "device_type_indicator": list(device_type_indicators),
                **optional_date_range(date_from, date_to),
            },
        )

    @shaped
    def history(
        self,
        host_id: str,
        query_id: str,
        query_indicators: Sequence[str] = (),
        device_type_indicators: Sequence[str] = (),
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Result:
        """Statistics for a single query, by the id found in `popular()`."""
        host = path_id(host_id, 'host_id')
        return self._get(
            f"/hosts/{host}/search-queries/{path_id(query_id, 'query_id')}/",
            {
                "query_indicator": list(query_indicators),
                "device_type_indicator": list(device_type_indicators),
                **optional_date_range(date_from, date_to),
            },
        )
