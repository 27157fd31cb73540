import unittest

from Webmaster.errors import WebmasterAPIError
from Webmaster.models import CRITICAL_ERROR, KIND_TRANSPORT, KIND_UPSTREAM, Err, Ok


class TestResultTypes(unittest.TestCase):
    def test_ok_accessors(self) -> None:
        result = Ok({"hosts": []}, status_code=200)
        self.assertTrue(result.ok)
        self.assertFalse(result.no_content)
        self.assertIsNone(result.error_code)
        self.assertEqual(result.unwrap(), {"hosts": []})
        self.assertEqual(result.to_dict(), {"hosts": []})

    def test_ok_no_content(self) -> None:
        result = Ok(None, status_code=204)
        self.assertTrue(result.no_content)
        self.assertEqual(result.to_dict(), {})

    def test_err_envelope(self) -> None:
        result = Err(kind=KIND_TRANSPORT, message="boom")
        self.assertFalse(result.ok)
        self.assertEqual(result.to_dict(), {"error_code": CRITICAL_ERROR, "error_message": "boom"})

    def test_err_unwrap_raises(self) -> None:
        result = Err(kind=KIND_TRANSPORT, message="boom", status_code=500)
        with self.assertRaises(WebmasterAPIError) as ctx:
            result.unwrap()
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(str(ctx.exception), "HTTP 500: CRITICAL_ERROR: boom")

    def test_upstream_keeps_service_object(self) -> None:
        payload = {"error_code": "HOST_NOT_VERIFIED", "error_message": "not verified", "host_id": "h"}
        result = Err.from_upstream(payload, status_code=403)
        self.assertEqual(result.kind, KIND_UPSTREAM)
        self.assertEqual(result.error_code, "HOST_NOT_VERIFIED")
        self.assertEqual(result.error_message, "not verified")
        self.assertEqual(result.to_dict(), payload)
        with self.assertRaises(WebmasterAPIError) as ctx:
            result.unwrap()
        self.assertEqual(ctx.exception.error_data, payload)
