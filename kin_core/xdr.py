"""
XDR codec for whitelist envelopes, backed by stellar-sdk.

The Kin ledger uses the Stellar XDR wire format for transactions. Envelopes
are ``stellar_sdk.xdr.TransactionEnvelope`` values; network ids are the
32-byte SHA-256 of the network passphrase, encoded as an XDR ``Hash``.

Decoding is strict:
    - truncated or otherwise unparseable input raises DecodeError;
    - trailing bytes raise DecodeError (the re-encoding must be bit-exact);
    - network ids that are not exactly 32 bytes raise DecodeError.
"""

from __future__ import annotations

import struct

from stellar_sdk import xdr as stellar_xdr

from kin_core.errors import DecodeError

NETWORK_ID_BYTES = 32

# Errors the generated XDR unpackers raise on malformed input.
_XDR_PARSE_ERRORS = (ValueError, TypeError, IndexError, EOFError, struct.error)


class StellarXdrCodec:
    """EnvelopeCodec over stellar-sdk XDR types."""

    def encode_envelope(self, envelope: stellar_xdr.TransactionEnvelope) -> bytes:
        return envelope.to_xdr_bytes()

    def decode_envelope(self, data: bytes) -> stellar_xdr.TransactionEnvelope:
        try:
            envelope = stellar_xdr.TransactionEnvelope.from_xdr_bytes(data)
        except _XDR_PARSE_ERRORS as exc:
            raise DecodeError(
                f"envelope is not a valid XDR TransactionEnvelope: {exc}",
                details={"size": len(data)},
            ) from exc
        if envelope.to_xdr_bytes() != data:
            raise DecodeError(
                "envelope has trailing or non-canonical bytes",
                details={"size": len(data)},
            )
        return envelope

    def encode_network_id(self, network_id: bytes) -> bytes:
        if len(network_id) != NETWORK_ID_BYTES:
            raise ValueError(
                f"network_id must be {NETWORK_ID_BYTES} bytes, got {len(network_id)}"
            )
        return stellar_xdr.Hash(network_id).to_xdr_bytes()

    def decode_network_id(self, data: bytes) -> bytes:
        if len(data) != NETWORK_ID_BYTES:
            raise DecodeError(
                f"network_id must be {NETWORK_ID_BYTES} bytes, got {len(data)}",
                details={"size": len(data)},
            )
        return stellar_xdr.Hash.from_xdr_bytes(data).hash
