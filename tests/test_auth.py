import asyncio
import base64
import datetime
import json
import time
import unittest
from unittest.mock import AsyncMock, patch

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.x509.oid import NameOID
from fastapi import HTTPException

from weekly_scheduler.auth import verify_firebase_token
from weekly_scheduler.config import FIREBASE_PROJECT_ID

KID = "test-key"


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def _make_certificate():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "securetoken.test")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )
    return key, cert.public_bytes(serialization.Encoding.PEM).decode()


class TestVerifyFirebaseToken(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.key, cls.cert_pem = _make_certificate()

    def setUp(self) -> None:
        patcher = patch(
            "weekly_scheduler.auth.get_google_public_keys",
            new=AsyncMock(return_value={KID: self.cert_pem}),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def make_token(self, header=None, **overrides) -> str:
        now = int(time.time())
        claims = {
            "aud": FIREBASE_PROJECT_ID,
            "iss": f"https://securetoken.google.com/{FIREBASE_PROJECT_ID}",
            "sub": "user-alice",
            "email": "alice@example.com",
            "iat": now - 10,
            "exp": now + 3600,
            "auth_time": now - 10,
        }
        claims.update(overrides)
        header = header or {"alg": "RS256", "kid": KID, "typ": "JWT"}
        signing_input = f"{_b64(json.dumps(header).encode())}.{_b64(json.dumps(claims).encode())}"
        signature = self.key.sign(signing_input.encode(), padding.PKCS1v15(), hashes.SHA256())
        return f"{signing_input}.{_b64(signature)}"

    def verify(self, token: str) -> dict:
        return asyncio.run(verify_firebase_token(token))

    def assert_rejected(self, token: str) -> HTTPException:
        with self.assertRaises(HTTPException) as ctx:
            self.verify(token)
        self.assertEqual(ctx.exception.status_code, 401)
        return ctx.exception

    def test_valid_token(self) -> None:
        claims = self.verify(self.make_token())
        self.assertEqual(claims["sub"], "user-alice")

    def test_malformed_token(self) -> None:
        self.assert_rejected("not-a-token")

    def test_wrong_audience(self) -> None:
        self.assert_rejected(self.make_token(aud="another-project"))

    def test_wrong_issuer(self) -> None:
        self.assert_rejected(self.make_token(iss="https://example.com"))

    def test_expired_token_is_flagged(self) -> None:
        exc = self.assert_rejected(self.make_token(exp=int(time.time()) - 5))
        self.assertEqual(exc.headers["X-Token-Expired"], "true")

    def test_non_rs256_algorithm(self) -> None:
        self.assert_rejected(self.make_token(header={"alg": "HS256", "kid": KID}))

    def test_tampered_payload(self) -> None:
        header, _payload, signature = self.make_token().split(".")
        forged = _b64(json.dumps({"aud": FIREBASE_PROJECT_ID, "sub": "mallory"}).encode())
        self.assert_rejected(f"{header}.{forged}.{signature}")

    def test_unknown_key_id(self) -> None:
        self.assert_rejected(self.make_token(header={"alg": "RS256", "kid": "other"}))


if __name__ == "__main__":
    unittest.main()
