from __future__ import annotations

from typing import Optional

from .._validators import require, validate_page
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class SitemapsAPI(BaseAPI):
    @shaped
    def list(
        self,
        host_id: str,
        parent_id: Optional[str] = None,
        limit: int = 10,
        from_id: Optional[str] = None,
    ) -> Result:
        """
        Sitemap files the crawler uses for this host.

        With `parent_id` the files of that sitemap index are listed, otherwise the
        root files. Files added by the user but not used yet are not included,
        see `user_added()`. `from_id` starts the page after that sitemap.
        """
        host = path_id(host_id, 'host_id')
        page = validate_page(0, limit)
        return self._get(
            f"/hosts/{host}/sitemaps/",
            {"limit": page["limit"], "parent_id": parent_id or None, "from": from_id or None},
        )

    @shaped
    def user_added(self, host_id: str) -> Result:
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/user-added-sitemaps/")

    @shaped
    def add(self, host_id: str, url: str) -> Result:
        return self._post(f"/hosts/{path_id(host_id, 'host_id')}/user-added-sitemaps/", {"url": require(url, "url")})

    @shaped
    def delete(self, host_id: str, sitemap_id: str) -> Result:
        """Only user-added sitemaps can be deleted; those from robots.txt cannot."""
        host = path_id(host_id, 'host_id')
        return self._delete(f"/hosts/{host}/user-added-sitemaps/{path_id(sitemap_id, 'sitemap_id')}/")
