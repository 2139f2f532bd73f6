"""Signing and verifying access tokens for profiles.

Uses HMAC-SHA256 and the lifetime (exp) inside the payload.
"""
# app/services/tokens.py
import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Optional

from src.app.core.config import settings


def _b64u_encode(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).rstrip(b"=").decode()


def _b64u_decode(s: str) -> bytes:
    pad = "=" * (-len(s) % 4)
    return base64.urlsafe_b64decode(s + pad)


def _signature(raw: bytes) -> bytes:
    return hmac.new(settings.SECRET_KEY.encode(), raw, hashlib.sha256).digest()


def sign_token(payload: dict, ttl_sec: int | None = None) -> str:
    """Sign an access token with TTL.

    Args:
        payload: Claims, at least `sub` (profile id) and `role`.
        ttl_sec: Lifetime in seconds, defaults to `ACCESS_TOKEN_TTL`.

    Returns:
        str: A token of the form `<b64(data)>.<b64(sig)>`.
    """
    ttl = settings.ACCESS_TOKEN_TTL if ttl_sec is None else ttl_sec
    data = payload | {"exp": int(time.time()) + int(ttl)}
    raw = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode()
    return f"{_b64u_encode(raw)}.{_b64u_encode(_signature(raw))}"


def issue_access_token(user_id: str, role: str, ttl_sec: int | None = None) -> str:
    return sign_token({"sub": user_id, "role": role}, ttl_sec)


def verify_token(token: str) -> Optional[dict]:
    """Verify the signature of the token and its validity period.

    Args:
        token: The token string.

    Returns:
        dict | None: Decoded claims on success, otherwise None.
    """
    try:
        raw_b64, sig_b64 = token.split(".", 1)
        raw = _b64u_decode(raw_b64)
        sig = _b64u_decode(sig_b64)
    except (ValueError, binascii.Error):
        return None

    if not hmac.compare_digest(sig, _signature(raw)):
        return None
    try:
        data = json.loads(raw.decode())
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict) or data.get("exp", 0) < int(time.time()):
        return None
    return data
