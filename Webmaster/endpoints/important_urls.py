from __future__ import annotations

from .._validators import require
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class ImportantUrlsAPI(BaseAPI):
    @shaped
    def list(self, host_id: str) -> Result:
        """Monitored important pages with their latest state."""
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/important-urls")

    @shaped
    def history(self, host_id: str, url: str) -> Result:
        return self._get(
            f"/hosts/{path_id(host_id, 'host_id')}/important-urls/history/",
            {"url": require(url, "url")},
        )
