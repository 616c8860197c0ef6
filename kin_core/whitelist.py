"""
Whitelist envelope: a signed transaction packaged for a co-signing service.

A whitelisting service must co-sign a transaction before the network will
accept it. The client sends the signed envelope together with the id of the
network it targets, so the service can reproduce the transaction hash.

Wire format (JSON object, bytes as standard base64):
    {
      "envelope":   "<base64 of canonical binary transaction envelope>",
      "network_id": "<base64 of canonical binary network id>"
    }

Rules:
    - The key names are a fixed contract with the whitelisting service.
    - encode() emits canonical JSON (sorted keys, no whitespace).
    - Unknown keys are ignored on decode.
    - decode(encode(x)) == x.

The binary encoding of both fields belongs to an EnvelopeCodec. The default
codec is StellarXdrCodec (see kin_core.xdr).
"""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import jsonschema  # type: ignore[import-untyped]

from kin_core.errors import DecodeError

ENVELOPE_KEY = "envelope"
NETWORK_ID_KEY = "network_id"

BASE64_PATTERN = r"^[A-Za-z0-9+/]*={0,2}$"

WHITELIST_ENVELOPE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": [ENVELOPE_KEY, NETWORK_ID_KEY],
    "properties": {
        ENVELOPE_KEY: {"type": "string", "pattern": BASE64_PATTERN},
        NETWORK_ID_KEY: {"type": "string", "pattern": BASE64_PATTERN},
    },
}


# =========================================================================
# Codec protocol
# =========================================================================


@runtime_checkable
class EnvelopeCodec(Protocol):
    """Canonical binary codec for transaction envelopes and network ids.

    Encoding must be deterministic: fixed field order, fixed-width
    integers, no padding ambiguity. Decode methods raise DecodeError on
    any input that does not parse under the codec's grammar.
    """

    def encode_envelope(self, envelope: Any) -> bytes:
        ...

    def decode_envelope(self, data: bytes) -> Any:
        ...

    def encode_network_id(self, network_id: Any) -> bytes:
        ...

    def decode_network_id(self, data: bytes) -> Any:
        ...


def default_codec() -> EnvelopeCodec:
    """The StellarXdrCodec, imported on first use."""
    from kin_core.xdr import StellarXdrCodec

    return StellarXdrCodec()


def decode_base64_field(value: str, key: str) -> bytes:
    """Decode one base64 wire field, raising DecodeError on bad input."""
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise DecodeError(
            f"{key} is not valid base64: {exc}", details={"key": key}
        ) from exc


# =========================================================================
# WhitelistEnvelope
# =========================================================================


@dataclass(frozen=True)
class WhitelistEnvelope:
    """A signed transaction envelope paired with its target network id.

    No validation at construction: the caller supplies a fully built and
    signed envelope.

    Attributes:
        transaction_envelope: Codec-specific transaction envelope value.
        network_id: Codec-specific network id (the passphrase hash).
    """

    transaction_envelope: Any
    network_id: Any

    # --- Serialization ---

    def to_dict(self, codec: EnvelopeCodec | None = None) -> dict[str, str]:
        """Build the keyed wire dict with base64 encoded fields."""
        codec = codec or default_codec()
        envelope_bytes = codec.encode_envelope(self.transaction_envelope)
        network_id_bytes = codec.encode_network_id(self.network_id)
        return {
            ENVELOPE_KEY: base64.b64encode(envelope_bytes).decode("ascii"),
            NETWORK_ID_KEY: base64.b64encode(network_id_bytes).decode("ascii"),
        }

    def encode(self, codec: EnvelopeCodec | None = None) -> bytes:
        """Serialize to canonical JSON bytes for the whitelisting service."""
        return json.dumps(
            self.to_dict(codec), sort_keys=True, separators=(",", ":")
        ).encode("utf-8")

    @classmethod
    def from_dict(
        cls, data: Any, codec: EnvelopeCodec | None = None
    ) -> WhitelistEnvelope:
        """Rebuild an envelope from its wire dict.

        Raises:
            DecodeError: If a key is missing, a value is not base64, or
                the decoded bytes do not parse under the codec.
        """
        try:
            jsonschema.validate(instance=data, schema=WHITELIST_ENVELOPE_SCHEMA)
        except jsonschema.ValidationError as exc:
            raise DecodeError(
                f"invalid whitelist envelope: {exc.message}",
                details={"path": [str(p) for p in exc.absolute_path]},
            ) from exc

        codec = codec or default_codec()
        envelope_bytes = decode_base64_field(data[ENVELOPE_KEY], ENVELOPE_KEY)
        network_id_bytes = decode_base64_field(data[NETWORK_ID_KEY], NETWORK_ID_KEY)
        return cls(
            transaction_envelope=codec.decode_envelope(envelope_bytes),
            network_id=codec.decode_network_id(network_id_bytes),
        )

    @classmethod
    def decode(
        cls, data: bytes | str, codec: EnvelopeCodec | None = None
    ) -> WhitelistEnvelope:
        """Parse JSON bytes produced by encode().

        Raises:
            DecodeError: If data is not JSON or from_dict() rejects it.
        """
        try:
            parsed = json.loads(data)
        except ValueError as exc:
            raise DecodeError(f"whitelist envelope is not valid JSON: {exc}") from exc
        return cls.from_dict(parsed, codec)
