"""
Security helpers for password hashing and JWT authentication.

Tokens are HS256 JSON Web Tokens built from HMAC-SHA256 signatures
and base64url encoding.  They carry the user's ``id`` and ``role``
plus an expiration timestamp (``exp``).  Passwords are hashed with
PBKDF2-HMAC-SHA256 and a random salt.  Both rely only on the standard
library.

``get_current_user`` and ``require_roles`` are FastAPI dependencies
used by the endpoint modules.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    Parameters
    ----------
    data : dict
        Claims to embed in the token, e.g. ``{"id": 1, "role": "client"}``.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Returns the payload when the signature matches and ``exp`` lies in
    the future, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


def token_for_user(user: Dict[str, Any]) -> str:
    """Issue an access token carrying the user's id and role."""
    return create_access_token({"id": user["id"], "role": user["role"]})


security = HTTPBearer(auto_error=False)


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, Any]:
    """Dependency that retrieves the current authenticated user.

    A missing ``Authorization`` header yields 401 ``no_token``.  An
    invalid or expired token, or one whose subject no longer exists,
    yields 401 ``invalid_token``.  The user row is reloaded from the
    database so that the role in effect is always the stored one.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="no_token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if not payload or "id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid_token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    from home_services_api.app.services.user_service import UserService

    user = UserService.get_user_row(payload["id"])
    if user is None:
        logger.warning("Token presented for missing user %s", payload["id"])
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid_token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# ---------------------------------------------------------------------------
# Role-based access control helpers
# ---------------------------------------------------------------------------

def require_roles(*roles: str, detail: str = "forbidden") -> Callable[..., Dict[str, Any]]:
    """Dependency factory enforcing that the current user has one of ``roles``.

    Use as ``Depends(require_roles("provider", detail="only_providers"))``.
    Users with any other role get a 403 carrying ``detail``.
    """

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("role") not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
        return current_user

    return _role_dependency


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    Returns the hex salt and hex digest joined by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salt$hash`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
