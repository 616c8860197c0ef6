"""
Service provider configuration.

A ServiceProvider names the ledger endpoint a client talks to and the
network it targets. The network id is the SHA-256 of the passphrase; it is
mixed into every transaction hash so a transaction signed for one network
cannot be replayed on another.

Configuration is passed in by the caller. Nothing here reads the
environment or the filesystem.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

from kin_core.whitelist import WhitelistEnvelope

KIN_MAINNET_PASSPHRASE = "Kin Mainnet ; December 2018"
KIN_TESTNET_PASSPHRASE = "Kin Testnet ; December 2018"


def network_id_from_passphrase(passphrase: str) -> bytes:
    """Compute the 32-byte network id for a passphrase."""
    return hashlib.sha256(passphrase.encode("utf-8")).digest()


@dataclass(frozen=True)
class ServiceProvider:
    """Endpoint and network identity for a Kin deployment.

    Attributes:
        url: Base URL of the ledger node (Horizon) endpoint.
        network_passphrase: Passphrase identifying the network.
    """

    url: str
    network_passphrase: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("url must be non-empty")
        if not self.network_passphrase:
            raise ValueError("network_passphrase must be non-empty")

    @property
    def network_id(self) -> bytes:
        return network_id_from_passphrase(self.network_passphrase)

    def whitelist_envelope(self, transaction_envelope: Any) -> WhitelistEnvelope:
        """Pair a signed envelope with this provider's network id."""
        return WhitelistEnvelope(
            transaction_envelope=transaction_envelope,
            network_id=self.network_id,
        )


KIN_MAINNET = ServiceProvider(
    url="https://horizon.kinfederation.com",
    network_passphrase=KIN_MAINNET_PASSPHRASE,
)

KIN_TESTNET = ServiceProvider(
    url="https://horizon-testnet.kininfrastructure.com",
    network_passphrase=KIN_TESTNET_PASSPHRASE,
)
