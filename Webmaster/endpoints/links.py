from __future__ import annotations

from typing import Sequence

from .._validators import DEFAULT_LIMIT, require, validate_page
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class LinksAPI(BaseAPI):
    @shaped
    def external_history(self, host_id: str, indicator: str = "LINKS_TOTAL_COUNT") -> Result:
        """How the number of external links to the site changed."""
        return self._get(
            f"/hosts/{path_id(host_id, 'host_id')}/links/external/history/",
            {"indicator": require(indicator, "indicator")},
        )

    @shaped
    def external_samples(self, host_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Result:
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/links/external/samples/", validate_page(offset, limit))

    @shaped
    def broken_samples(
        self,
        host_id: str,
        indicators: Sequence[str] = (),
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
    ) -> Result:
        """
        Broken internal links.

        Args:
            indicators: Broken link kinds to include, e.g. SITE_ERROR,
                DISALLOWED_BY_USER, UNSUPPORTED_BY_ROBOT. Empty means all.
        """
        host = path_id(host_id, 'host_id')
        params = validate_page(offset, limit)
        return self._get(
            f"/hosts/{host}/links/internal/broken/samples",
            {**params, "indicator": list(indicators)},
        )

    @shaped
    def broken_history(self, host_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Result:
        return self._get(
            f"/hosts/{path_id(host_id, 'host_id')}/links/internal/broken/history/",
            validate_page(offset, limit),
        )
