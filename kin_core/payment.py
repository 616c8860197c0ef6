"""
Payment records derived from ledger transaction events.

A TxEvent is a confirmed transaction as delivered by the network feed,
already parsed into Python values. It may carry several payments in
different assets. PaymentInfo is the view of that event from one account's
side, restricted to one asset:

    - Only the FIRST payment in the event whose asset equals the target is
      considered. Later payments of the same asset are ignored.
    - With no matching payment, amount is 0, destination is "" and source
      falls back to the event's source account.
    - credit holds iff the observer is the destination. debit is its
      negation, so an observer on neither side counts as debit.

PaymentInfo never raises. It is computed on every event of a history feed,
and a missing payment is a default value, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from kin_core.units import from_quarks

# Asset code used for the network's native currency.
NATIVE_ASSET_CODE = "native"


@dataclass(frozen=True)
class Asset:
    """A currency on the ledger. Equality is exact on code and issuer."""

    code: str
    issuer: str | None = None

    @classmethod
    def native(cls) -> Asset:
        return cls(code=NATIVE_ASSET_CODE)

    @property
    def is_native(self) -> bool:
        return self.code == NATIVE_ASSET_CODE and self.issuer is None


@dataclass(frozen=True)
class RawPayment:
    """One payment operation inside a ledger transaction.

    Attributes:
        asset: Asset being moved.
        source: Sending account.
        destination: Receiving account.
        amount: Amount in quarks.
    """

    asset: Asset
    source: str
    destination: str
    amount: int


@dataclass(frozen=True)
class TxEvent:
    """A confirmed ledger transaction with its payments in ledger order."""

    hash: str
    created_at: datetime
    source_account: str
    memo_text: str | None = None
    memo_data: bytes | None = None
    payments: tuple[RawPayment, ...] = field(default_factory=tuple)


class PaymentInfo:
    """Directional payment view of a TxEvent for one account and asset.

    All properties are projections of the three constructor arguments.
    """

    __slots__ = ("_event", "_account", "_asset")

    def __init__(self, event: TxEvent, account: str, asset: Asset) -> None:
        self._event = event
        self._account = account
        self._asset = asset

    def _payment(self) -> RawPayment | None:
        for payment in self._event.payments:
            if payment.asset == self._asset:
                return payment
        return None

    @property
    def created_at(self) -> datetime:
        return self._event.created_at

    @property
    def credit(self) -> bool:
        return self._account == self.destination

    @property
    def debit(self) -> bool:
        return not self.credit

    @property
    def source(self) -> str:
        payment = self._payment()
        if payment is None:
            return self._event.source_account
        return payment.source

    @property
    def hash(self) -> str:
        return self._event.hash

    @property
    def amount(self) -> Decimal:
        """Matched amount in Kin (quarks / 10,000), or 0."""
        payment = self._payment()
        if payment is None:
            return Decimal(0)
        return from_quarks(payment.amount)

    @property
    def destination(self) -> str:
        payment = self._payment()
        if payment is None:
            return ""
        return payment.destination

    @property
    def memo_text(self) -> str | None:
        return self._event.memo_text

    @property
    def memo_data(self) -> bytes | None:
        return self._event.memo_data

    def __repr__(self) -> str:
        direction = "credit" if self.credit else "debit"
        return (
            f"PaymentInfo(hash={self.hash!r}, {direction}, "
            f"amount={self.amount}, source={self.source!r}, "
            f"destination={self.destination!r})"
        )
