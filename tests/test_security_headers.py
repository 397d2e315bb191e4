import unittest
from unittest.mock import patch

from tests.support import ApiTestCase


class TestSecurityHeaders(ApiTestCase):
    def test_headers_on_api_responses(self) -> None:
        resp = self.client.get("/")

        self.assertEqual(resp.headers["X-Content-Type-Options"], "nosniff")
        self.assertEqual(resp.headers["X-Frame-Options"], "DENY")
        self.assertNotIn("Strict-Transport-Security", resp.headers)

    def test_excluded_paths_are_left_alone(self) -> None:
        resp = self.client.get("/health")
        self.assertNotIn("X-Frame-Options", resp.headers)

    @patch("weekly_scheduler.security_headers.IS_PRODUCTION", True)
    def test_hsts_only_in_production(self) -> None:
        resp = self.client.get("/")
        self.assertIn("max-age=", resp.headers["Strict-Transport-Security"])


if __name__ == "__main__":
    unittest.main()
