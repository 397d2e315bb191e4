import unittest

from tests.support import ApiTestCase
from weekly_scheduler.subdomain import extract_subdomain, resolve_public_path

ROOT = "weeklyscheduler.vercel.app"


class TestResolvePublicPath(unittest.TestCase):
    def test_username_subdomain_is_rewritten(self) -> None:
        self.assertEqual(resolve_public_path(f"alice.{ROOT}", "/"), "/public/alice")
        self.assertEqual(resolve_public_path(f"alice.{ROOT}", "/anything"), "/public/alice")

    def test_port_and_case_are_ignored(self) -> None:
        self.assertEqual(resolve_public_path(f"Alice.{ROOT}:443", "/"), "/public/alice")

    def test_reserved_and_app_subdomains_are_left_alone(self) -> None:
        for sub in ("www", "api", "admin", "mail", "staging", "test", "weeklyscheduler"):
            with self.subTest(sub=sub):
                self.assertIsNone(resolve_public_path(f"{sub}.{ROOT}", "/"))

    def test_bare_and_foreign_hosts_are_left_alone(self) -> None:
        self.assertIsNone(resolve_public_path(ROOT, "/"))
        self.assertIsNone(resolve_public_path("localhost:8000", "/"))
        self.assertIsNone(resolve_public_path("127.0.0.1:8000", "/"))
        self.assertIsNone(resolve_public_path("alice.example.com", "/"))
        self.assertIsNone(resolve_public_path(f"a.b.{ROOT}", "/"))

    def test_api_and_static_paths_are_skipped(self) -> None:
        host = f"alice.{ROOT}"
        self.assertIsNone(resolve_public_path(host, "/api/public-schedule"))
        self.assertIsNone(resolve_public_path(host, "/_next/static/chunk"))
        self.assertIsNone(resolve_public_path(host, "/favicon.ico"))
        self.assertIsNone(resolve_public_path(host, "/logo.png"))

    def test_extract_subdomain(self) -> None:
        self.assertEqual(extract_subdomain(f"bob.{ROOT}."), "bob")
        self.assertIsNone(extract_subdomain(f".{ROOT}"))


class TestSubdomainRouting(ApiTestCase):
    def test_subdomain_request_serves_public_schedule(self) -> None:
        self.add_profile("user-bob", "bob")
        self.add_entry("user-bob", "01/01/2024", 1, "09:00", "10:00", "Dentist", is_private=True)

        resp = self.client.get("/", params={"weekKey": "01/01/2024"}, headers={"host": f"bob.{ROOT}"})

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["username"], "bob")
        self.assertEqual(body["schedule"]["1"][0]["description"], "Busy")

    def test_unknown_subdomain_user_is_404(self) -> None:
        resp = self.client.get("/", headers={"host": f"nobody.{ROOT}"})
        self.assertEqual(resp.status_code, 404)

    def test_main_domain_is_not_rewritten(self) -> None:
        resp = self.client.get("/", headers={"host": ROOT})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("message", resp.json())


if __name__ == "__main__":
    unittest.main()
