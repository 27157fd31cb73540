import unittest
from urllib.parse import parse_qs

import httpx

from Webmaster import get_access_token
from Webmaster.client import OAUTH_TOKEN_URL
from Webmaster.models import KIND_MALFORMED, KIND_TRANSPORT, KIND_UPSTREAM


class TestGetAccessToken(unittest.TestCase):
    def test_posts_authorization_code_form(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            self.assertEqual(request.method, "POST")
            self.assertEqual(str(request.url), OAUTH_TOKEN_URL)
            form = parse_qs(request.content.decode("utf-8"))
            self.assertEqual(form["grant_type"], ["authorization_code"])
            self.assertEqual(form["code"], ["1234567"])
            self.assertEqual(form["client_id"], ["cid"])
            self.assertEqual(form["client_secret"], ["secret"])
            return httpx.Response(200, json={"access_token": "tok", "token_type": "bearer", "expires_in": 31536000})

        with self.assertWarns(DeprecationWarning):
            result = get_access_token("1234567", "cid", "secret", transport=httpx.MockTransport(handler))
        self.assertTrue(result.ok)
        self.assertEqual(result.data["access_token"], "tok")

    def test_oauth_error_is_upstream(self) -> None:
        body = {"error": "invalid_grant", "error_description": "Code has expired"}

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json=body)

        with self.assertWarns(DeprecationWarning):
            result = get_access_token("old", "cid", "secret", transport=httpx.MockTransport(handler))
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, KIND_UPSTREAM)
        self.assertEqual(result.error_code, "invalid_grant")
        self.assertEqual(result.error_message, "Code has expired")
        self.assertEqual(result.to_dict(), body)

    def test_empty_and_malformed_bodies(self) -> None:
        cases = (
            (httpx.Response(500, content=b""), KIND_TRANSPORT),
            (httpx.Response(200, content=b"oops"), KIND_MALFORMED),
            (httpx.Response(301, headers={"Location": "http://x/"}), KIND_TRANSPORT),
        )
        for response, kind in cases:
            with self.assertWarns(DeprecationWarning):
                result = get_access_token(
                    "c", "cid", "secret", transport=httpx.MockTransport(lambda request, r=response: r)
                )
            self.assertEqual(result.kind, kind)
