"""
kin-core: client-side data model for the Kin payment network.

Public API:

    Payments (pure):
        - ``PaymentInfo``: directional view of a ledger event for one
          account and asset.
        - ``TxEvent``, ``RawPayment``, ``Asset``: parsed ledger input.

    App id and memos (pure):
        - ``AppId``: validated four character application id.
        - ``prepend_app_id_if_needed()``: idempotent ``1-XXXX-`` tagging.

    Whitelisting:
        - ``WhitelistEnvelope``: signed envelope + network id, with its
          keyed wire encoding.
        - ``EnvelopeCodec``: binary codec protocol; ``StellarXdrCodec``
          is the default (import from ``kin_core.xdr``).
        - ``WhitelistClient``: posts envelopes to a co-signing service.

    Configuration:
        - ``ServiceProvider``, ``KIN_MAINNET``, ``KIN_TESTNET``.

    Errors:
        - ``KinError``, ``InvalidAppId``, ``DecodeError``,
          ``WhitelistServiceError``.
"""

from kin_core.app_id import AppId
from kin_core.client import WhitelistClient
from kin_core.errors import (
    DecodeError,
    InvalidAppId,
    KinError,
    KinErrorCode,
    WhitelistServiceError,
)
from kin_core.memo import (
    MAX_MEMO_BYTES,
    is_tagged,
    prepend_app_id_if_needed,
    validate_memo_size,
)
from kin_core.network import (
    KIN_MAINNET,
    KIN_TESTNET,
    ServiceProvider,
    network_id_from_passphrase,
)
from kin_core.payment import Asset, PaymentInfo, RawPayment, TxEvent
from kin_core.transport import HttpxTransport, WhitelistTransport
from kin_core.units import ASSET_UNIT_DIVISOR, AccountStatus, from_quarks, to_quarks
from kin_core.whitelist import EnvelopeCodec, WhitelistEnvelope

__version__ = "0.1.0"
__all__ = [
    "ASSET_UNIT_DIVISOR",
    "AccountStatus",
    "AppId",
    "Asset",
    "DecodeError",
    "EnvelopeCodec",
    "HttpxTransport",
    "InvalidAppId",
    "KIN_MAINNET",
    "KIN_TESTNET",
    "KinError",
    "KinErrorCode",
    "MAX_MEMO_BYTES",
    "PaymentInfo",
    "RawPayment",
    "ServiceProvider",
    "TxEvent",
    "WhitelistClient",
    "WhitelistEnvelope",
    "WhitelistServiceError",
    "WhitelistTransport",
    "from_quarks",
    "is_tagged",
    "network_id_from_passphrase",
    "prepend_app_id_if_needed",
    "to_quarks",
    "validate_memo_size",
]
