"""HMAC-SHA256 signature verification for webhook payloads.

When a webhook is created with a secret, every delivery is signed with
HMAC-SHA256 over the raw request body and the uppercase hex digest is sent in
the ``X-Fivetran-Signature-256`` header. Verify the signature against the
body bytes exactly as received, before any JSON parsing.

Verification never raises: ``verify`` returns a ``SignatureStatus`` so an HTTP
adapter can answer a missing signature (400) differently from a wrong one
(401). Digests are compared with ``hmac.compare_digest``.
"""

from __future__ import annotations

import hashlib
import hmac

from ..config import SIGNATURE_HEADER
from ..core import SignatureStatus, WebhookSignatureError


def _to_bytes(value: bytes | bytearray | str) -> bytes:
    if isinstance(value, str):
        # surrogatepass keeps lone surrogates hashable instead of raising
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


def compute_signature(payload: bytes | str, secret: bytes | str) -> str:
    """Compute the uppercase hex HMAC-SHA256 of ``payload`` keyed by ``secret``.

    Args:
        payload: Raw request body
        secret: Webhook secret

    Returns:
        64-character uppercase hex digest
    """
    digest = hmac.new(_to_bytes(secret), _to_bytes(payload), hashlib.sha256)
    return digest.hexdigest().upper()


def verify(
    payload: bytes | str,
    signature: str | None,
    secret: bytes | str,
) -> SignatureStatus:
    """Check a webhook signature.

    Args:
        payload: Raw request body
        signature: Value of the signature header, in any letter case
        secret: Webhook secret

    Returns:
        ``VALID``, ``MISSING_SIGNATURE`` for a None/empty signature, or
        ``INVALID_SIGNATURE`` when it does not match
    """
    if not signature:
        return SignatureStatus.MISSING_SIGNATURE

    expected = compute_signature(payload, secret).encode("ascii")
    # Non-ASCII input can never match a hex digest; encode it losslessly so
    # the comparison still runs instead of raising.
    supplied = signature.upper().encode("utf-8", "surrogatepass")
    if hmac.compare_digest(expected, supplied):
        return SignatureStatus.VALID
    return SignatureStatus.INVALID_SIGNATURE


def verify_or_raise(
    payload: bytes | str,
    signature: str | None,
    secret: bytes | str,
) -> None:
    """Like ``verify`` but raise ``MissingSignatureError``/``InvalidSignatureError``."""
    status = verify(payload, signature, secret)
    if not status.ok:
        WebhookSignatureError.raise_for(status)


def signature_header() -> str:
    """Header carrying the signature, lowercase (header lookup is case-insensitive)."""
    return SIGNATURE_HEADER
