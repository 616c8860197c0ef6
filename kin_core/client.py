"""
Whitelist service client.

Posts a WhitelistEnvelope to the co-signing service and returns the
co-signed transaction envelope from its answer.

Request body:  {"envelope": "<base64>", "network_id": "<base64>"}
Response body: {"envelope": "<base64 of the co-signed envelope>"}

No retry loops. HTTP and socket failures raise WhitelistServiceError,
malformed answers raise DecodeError, and any other exception from the
transport propagates unchanged. Submitting the co-signed envelope to the ledger
is the caller's concern.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import jsonschema  # type: ignore[import-untyped]

from kin_core.errors import DecodeError, WhitelistServiceError
from kin_core.transport import HttpxTransport, WhitelistTransport
from kin_core.whitelist import (
    BASE64_PATTERN,
    ENVELOPE_KEY,
    EnvelopeCodec,
    WhitelistEnvelope,
    decode_base64_field,
    default_codec,
)

logger = logging.getLogger(__name__)

WHITELIST_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": [ENVELOPE_KEY],
    "properties": {
        ENVELOPE_KEY: {"type": "string", "pattern": BASE64_PATTERN},
    },
}


class WhitelistClient:
    """Client for a transaction whitelisting service.

    Args:
        url: The whitelist endpoint URL.
        codec: Envelope codec. Defaults to StellarXdrCodec.
        transport: Injectable transport for HTTP POST. Defaults to
            HttpxTransport. Pass a FakeTransport for testing.
    """

    def __init__(
        self,
        url: str,
        codec: EnvelopeCodec | None = None,
        transport: WhitelistTransport | None = None,
    ) -> None:
        if not url:
            raise ValueError("url must be non-empty")
        self._url = url
        self._codec = codec or default_codec()
        self._transport = transport or HttpxTransport()

    @property
    def url(self) -> str:
        """The whitelist endpoint URL."""
        return self._url

    async def whitelist(self, envelope: WhitelistEnvelope) -> Any:
        """Request a co-signature for envelope.

        Returns:
            The co-signed transaction envelope, decoded with the codec.

        Raises:
            WhitelistServiceError: If the request failed with an HTTP or
                socket error.
            DecodeError: If the response is not a valid envelope answer.
        """
        payload = envelope.to_dict(self._codec)
        logger.debug("Requesting whitelist co-signature from %s", self._url)

        try:
            response = await self._transport.post_json(self._url, payload)
        except (httpx.HTTPError, OSError) as exc:
            logger.warning("Whitelist request to %s failed: %s", self._url, exc)
            raise WhitelistServiceError(
                f"whitelist request failed: {exc}",
                details={"url": self._url, "error": type(exc).__name__},
            ) from exc

        return _parse_whitelist_response(response, self._codec)


def _parse_whitelist_response(response: Any, codec: EnvelopeCodec) -> Any:
    try:
        jsonschema.validate(instance=response, schema=WHITELIST_RESPONSE_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise DecodeError(
            f"invalid whitelist response: {exc.message}",
            details={"path": [str(p) for p in exc.absolute_path]},
        ) from exc

    envelope_bytes = decode_base64_field(response[ENVELOPE_KEY], ENVELOPE_KEY)
    return codec.decode_envelope(envelope_bytes)
