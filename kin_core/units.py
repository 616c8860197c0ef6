"""
Kin amount units.

Ledger amounts are integers denominated in quarks, the smallest indivisible
unit. One Kin is 10,000 quarks, so a quark is ``0.0001`` Kin.
"""

from __future__ import annotations

from decimal import Decimal
from enum import IntEnum

# Quarks per Kin.
ASSET_UNIT_DIVISOR = 10_000


class AccountStatus(IntEnum):
    """Lifecycle of an account on the network."""

    NOT_CREATED = 0
    NOT_ACTIVATED = 1
    ACTIVATED = 2


def from_quarks(quarks: int) -> Decimal:
    """Convert an integer quark amount to a Kin ``Decimal``."""
    return Decimal(quarks) / Decimal(ASSET_UNIT_DIVISOR)


def to_quarks(kin: Decimal | int | str) -> int:
    """Convert a Kin amount to integer quarks.

    Raises:
        ValueError: If the amount has more precision than one quark.
    """
    scaled = Decimal(kin) * ASSET_UNIT_DIVISOR
    if scaled != scaled.to_integral_value():
        raise ValueError(f"amount {kin!r} is finer than one quark")
    return int(scaled)
