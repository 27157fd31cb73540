from __future__ import annotations

from typing import Optional

from .._validators import DateLike, date_window, require
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class HostsAPI(BaseAPI):
    """Sites registered for the user: listing, adding, verification and overall health."""

    def list(self) -> Result:
        """All hosts added for the current user."""
        return self._get("/hosts/")

    @shaped
    def add(self, url: str) -> Result:
        """
        Add a host. Pass the full address, preferably with protocol.

        On success the payload carries the new `host_id`.
        """
        return self._post("/hosts/", {"host_url": require(url, "url")})

    @shaped
    def delete(self, host_id: str) -> Result:
        return self._delete(f"/hosts/{path_id(host_id, 'host_id')}/")

    @shaped
    def info(self, host_id: str) -> Result:
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/")

    @shaped
    def summary(self, host_id: str) -> Result:
        """Host info together with its key indexing figures."""
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/summary/")

    @shaped
    def owners(self, host_id: str) -> Result:
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/owners/")

    @shaped
    def verification(self, host_id: str) -> Result:
        """Verification state and the applicable verifiers."""
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/verification/")

    @shaped
    def verify(self, host_id: str, verification_type: str) -> Result:
        """
        Start verification of a host.

        Args:
            host_id: Host id as returned by `list()`
            verification_type: One of DNS, HTML_FILE, META_TAG, WHOIS; see
                `applicable_verifiers` in the `verification()` payload

        The service rejects hosts already verified or being verified.
        """
        return self._post(
            f"/hosts/{path_id(host_id, 'host_id')}/verification/",
            {},
            params={"verification_type": require(verification_type, "verification_type")},
        )

    @shaped
    def diagnostics(self, host_id: str) -> Result:
        """Problems detected on the site."""
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/diagnostics/")

    @shaped
    def sqi_history(
        self,
        host_id: str,
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
    ) -> Result:
        """Site quality index history, last month by default."""
        host = path_id(host_id, 'host_id')
        start, end = date_window(date_from, date_to)
        return self._get(f"/hosts/{host}/sqi-history/", {"date_from": start, "date_to": end})
