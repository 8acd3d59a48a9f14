"""Token service: signed, self-contained session tokens."""

import hashlib
import hmac
import json
import logging
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from collections.abc import Callable
from typing import NoReturn

from pydantic import ValidationError

from notesmate.config import TokenConfig
from notesmate.domain.auth.model.claims import Claims, ClaimSet
from notesmate.domain.shared.error import InvalidTokenError
from notesmate.domain.shared.service import Service

logger = logging.getLogger(__name__)


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def _b64encode(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    return urlsafe_b64decode(data + "=" * (-len(data) % 4))


class TokenService(Service):
    """Issues and verifies session tokens.

    Format: ``base64url(canonical JSON claims) + "." + base64url(HMAC-SHA256)``,
    padding stripped. The signature is computed over the encoded payload segment,
    so every claim, including the expiry, is bound to it.

    Tokens are not stored anywhere and cannot be revoked before they expire.
    """

    _config: TokenConfig
    _now_ms: Callable[[], int] = _epoch_ms

    @property
    def validity_seconds(self) -> int:
        return self._config.validity_seconds

    def stamp(self, claim_set: ClaimSet) -> Claims:
        """Attach an absolute expiry of now + configured validity."""
        return Claims(
            **claim_set.model_dump(exclude={"expires_at_epoch_ms"}),
            expires_at_epoch_ms=self._now_ms() + self._config.validity_ms,
        )

    def encode(self, claims: Claims) -> str:
        """Serialize and sign already-stamped claims."""
        payload = json.dumps(
            claims.model_dump(mode="json", by_alias=True, exclude_none=True),
            sort_keys=True,
            separators=(",", ":"),
        ).encode("utf-8")
        payload_b64 = _b64encode(payload)
        return f"{payload_b64}.{self._sign(payload_b64)}"

    def issue(self, claim_set: ClaimSet) -> str:
        """Stamp an expiry on ``claim_set`` and return the signed token."""
        return self.encode(self.stamp(claim_set))

    def verify(self, token: str) -> Claims:
        """Verify a token and return its claims.

        Raises:
            InvalidTokenError: for every failure. Malformed, tampered and expired
                tokens look the same to the caller; only the log says which.
        """
        if not token or not token.isascii():
            self._reject("not an ASCII string")

        parts = token.split(".")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            self._reject("expected exactly two non-empty segments")
        payload_b64, signature_b64 = parts

        expected = self._sign(payload_b64)
        if not hmac.compare_digest(expected.encode("ascii"), signature_b64.encode("ascii")):
            self._reject("signature mismatch")

        try:
            data = json.loads(_b64decode(payload_b64).decode("utf-8"))
        except (ValueError, UnicodeDecodeError):
            self._reject("payload is not base64url-encoded JSON")
        if not isinstance(data, dict):
            self._reject("payload is not a JSON object")

        try:
            claims = Claims.model_validate(data)
        except ValidationError as e:
            self._reject(f"payload does not describe valid claims ({e.error_count()} error(s))")

        now = self._now_ms()
        if claims.expires_at_epoch_ms <= now:
            self._reject(
                f"expired {now - claims.expires_at_epoch_ms}ms ago "
                f"(principal={claims.principal_id})"
            )

        return claims

    def _sign(self, payload_b64: str) -> str:
        signature = hmac.new(
            self._config.secret.encode("utf-8"),
            payload_b64.encode("ascii"),
            hashlib.sha256,
        ).digest()
        return _b64encode(signature)

    @staticmethod
    def _reject(reason: str) -> NoReturn:
        logger.warning("Token rejected: %s", reason)
        raise InvalidTokenError()
