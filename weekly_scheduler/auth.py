import base64
import json
import logging
import time
from typing import Optional

import httpx
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.x509 import load_pem_x509_certificate
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import FIREBASE_PROJECT_ID, PUBLIC_KEYS_TIMEOUT
from .database import get_db
from .models import UserProfile

logger = logging.getLogger(__name__)

# Missing credentials are answered with 401 below, not the scheme default
security = HTTPBearer(auto_error=False)

GOOGLE_CERTS_URL = (
    "https://www.googleapis.com/robot/v1/metadata/x509/securetoken@system.gserviceaccount.com"
)

# Cache for Google's public keys
_cached_keys = None


def _b64decode(segment: str) -> bytes:
    padding_len = 4 - len(segment) % 4
    return base64.urlsafe_b64decode(segment + ("=" * padding_len if padding_len != 4 else ""))


async def get_google_public_keys(force_refresh: bool = False):
    """Fetch Google's public keys for Firebase token verification"""
    global _cached_keys
    if _cached_keys and not force_refresh:
        return _cached_keys

    try:
        async with httpx.AsyncClient(timeout=PUBLIC_KEYS_TIMEOUT) as client:
            response = await client.get(GOOGLE_CERTS_URL)
        if response.status_code == 200:
            _cached_keys = response.json()
            logger.info(f"✅ Fetched {len(_cached_keys)} Google public keys")
            return _cached_keys
        logger.error(f"❌ Failed to fetch Google public keys: HTTP {response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"❌ Error fetching Google public keys: {str(e)}")
    return None


async def verify_firebase_token(token: str) -> dict:
    """
    Verify a Firebase ID token: RS256 signature against Google's certificates,
    then audience, issuer, expiry and issued-at claims.
    """
    if not FIREBASE_PROJECT_ID:
        logger.error("❌ FIREBASE_PROJECT_ID not configured")
        raise HTTPException(status_code=500, detail="Authentication not configured")

    parts = token.split(".")
    if len(parts) != 3:
        raise HTTPException(status_code=401, detail="Invalid token format")
    header_b64, payload_b64, signature_b64 = parts

    try:
        header = json.loads(_b64decode(header_b64))
    except ValueError as e:
        logger.error(f"❌ Failed to decode token header: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid token header") from e

    kid = header.get("kid")
    if header.get("alg") != "RS256":
        logger.error(f"❌ Invalid token algorithm: {header.get('alg')}")
        raise HTTPException(status_code=401, detail="Invalid token algorithm")
    if not kid:
        raise HTTPException(status_code=401, detail="Token missing key ID")

    public_keys = await get_google_public_keys()
    if not public_keys or kid not in public_keys:
        logger.warning(f"⚠️ Key ID {kid} not found in public keys, refreshing")
        public_keys = await get_google_public_keys(force_refresh=True)
        if not public_keys or kid not in public_keys:
            raise HTTPException(status_code=401, detail="Unable to verify token signature")

    try:
        cert = load_pem_x509_certificate(public_keys[kid].encode(), default_backend())
        cert.public_key().verify(
            _b64decode(signature_b64),
            f"{header_b64}.{payload_b64}".encode(),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
    except Exception as e:
        logger.error(f"❌ Token signature verification failed: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid token signature") from e

    try:
        claims = json.loads(_b64decode(payload_b64))
    except ValueError as e:
        raise HTTPException(status_code=401, detail="Invalid token payload") from e

    if claims.get("aud") != FIREBASE_PROJECT_ID:
        logger.error("❌ Token audience mismatch")
        raise HTTPException(status_code=401, detail="Invalid token audience")
    if claims.get("iss") != f"https://securetoken.google.com/{FIREBASE_PROJECT_ID}":
        logger.error("❌ Token issuer mismatch")
        raise HTTPException(status_code=401, detail="Invalid token issuer")

    now = time.time()
    if claims.get("exp", 0) < now:
        raise HTTPException(
            status_code=401,
            detail="Token has expired. Please refresh your session.",
            headers={"X-Token-Expired": "true"},
        )
    # Allow 60 seconds clock skew
    if claims.get("iat", 0) > now + 60:
        logger.warning("⚠️ Token issued in the future")
        raise HTTPException(status_code=401, detail="Invalid token")
    if "auth_time" not in claims:
        raise HTTPException(status_code=401, detail="Invalid token claims")

    return claims


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """Verified identity of the caller: {"uid": ..., "email": ...}"""
    if not credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated. Please provide a valid Bearer token in the Authorization header.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = await verify_firebase_token(credentials.credentials)

    # Firebase ID tokens use 'sub' as the user ID claim
    uid = claims.get("sub") or claims.get("user_id")
    if not uid:
        logger.error(f"❌ Token missing user ID claim. Available claims: {list(claims.keys())}")
        raise HTTPException(status_code=401, detail="Invalid token claims")

    return {"uid": uid, "email": claims.get("email")}


async def get_current_profile(
    identity: dict = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> UserProfile:
    """
    Profile of the authenticated user. Schedule routes use this dependency:
    a missing or incomplete profile must be completed first.
    """
    try:
        profile = db.query(UserProfile).filter(UserProfile.id == identity["uid"]).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error loading profile for user {identity['uid']}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load profile") from e

    if not profile or not profile.is_complete:
        logger.warning(f"⚠️ User {identity['uid']} attempted schedule access without a complete profile")
        raise HTTPException(
            status_code=403,
            detail="Profile incomplete. Please set your name and username first.",
            headers={"X-Profile-Incomplete": "true"},
        )

    return profile
