from __future__ import annotations

from .._validators import DEFAULT_LIMIT, require, validate_page
from ..models import Result
from ._base import BaseAPI, path_id, shaped


class OriginalTextsAPI(BaseAPI):
    @shaped
    def list(self, host_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT) -> Result:
        return self._get(f"/hosts/{path_id(host_id, 'host_id')}/original-texts/", validate_page(offset, limit))

    @shaped
    def add(self, host_id: str, content: str) -> Result:
        """
        Add an original text.

        Text size is not checked here; the service reports texts that are too
        short or too long.
        """
        return self._post(
            f"/hosts/{path_id(host_id, 'host_id')}/original-texts/",
            {"content": require(content, "content")},
        )

    @shaped
    def delete(self, host_id: str, text_id: str) -> Result:
        host = path_id(host_id, 'host_id')
        return self._delete(f"/hosts/{host}/original-texts/{path_id(text_id, 'text_id')}/")
