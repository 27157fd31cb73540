from __future__ import annotations

from typing import Optional

from .._validators import DEFAULT_LIMIT, DateLike, date_window, require, validate_page
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class RecrawlAPI(BaseAPI):
    @shaped
    def queue(
        self,
        host_id: str,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
    ) -> Result:
        """Recrawl tasks created in the window (last month by default)."""
        host = path_id(host_id, 'host_id')
        start, end = date_window(date_from, date_to)
        params = validate_page(offset, limit)
        return self._get(f"/hosts/{host}/recrawl/queue/", {**params, "date_from": start, "date_to": end})

    @shaped
    def add(self, host_id: str, url: str) -> Result:
        """Submit a page for recrawl. The payload carries the new `task_id`."""
        return self._post(f"/hosts/{path_id(host_id, 'host_id')}/recrawl/queue/", {"url": require(url, "url")})

    @shaped
    def quota(self, host_id: str) -> Result:
        """Daily recrawl quota."""
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/recrawl/quota/")

    @shaped
    def task(self, host_id: str, task_id: str) -> Result:
        host = path_id(host_id, 'host_id')
        return self._get(f"/hosts/{host}/recrawl/queue/{path_id(task_id, 'task_id')}")
