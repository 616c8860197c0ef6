"""
Tests for PaymentInfo derivation.

Test plan:
- Matching payment: credit/debit, amount scaled by 10,000, parties
- No matching asset: amount 0, destination "", source = event account
- Empty payment list behaves like no match
- First match only: later payments of the same asset ignored
- Payments of other assets before the match are skipped
- Observer on neither side is debit; observer as source is debit
- Pass-through fields: hash, created_at, memo_text, memo_data
- Asset equality is exact on code and issuer
"""

from datetime import datetime, timezone
from decimal import Decimal

from kin_core.payment import Asset, PaymentInfo, RawPayment, TxEvent

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

KIN = Asset.native()
OTHER = Asset(code="USD", issuer="GISSUER")
CREATED_AT = datetime(2018, 12, 1, 12, 0, tzinfo=timezone.utc)


def _event(*payments: RawPayment, **overrides: object) -> TxEvent:
    kwargs: dict[str, object] = {
        "hash": "a" * 64,
        "created_at": CREATED_AT,
        "source_account": "GEVENT",
        "memo_text": "1-abcd-hello",
        "memo_data": None,
        "payments": tuple(payments),
    }
    kwargs.update(overrides)
    return TxEvent(**kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Matching payment
# ---------------------------------------------------------------------------


class TestMatchingPayment:
    def test_credit_for_destination(self) -> None:
        event = _event(RawPayment(KIN, "S", "D", 50000))
        info = PaymentInfo(event, "D", KIN)
        assert info.credit is True
        assert info.debit is False
        assert info.amount == Decimal("5")
        assert info.amount == 5.0
        assert info.destination == "D"
        assert info.source == "S"

    def test_debit_for_source(self) -> None:
        event = _event(RawPayment(KIN, "S", "D", 50000))
        info = PaymentInfo(event, "S", KIN)
        assert info.debit is True
        assert info.credit is False

    def test_fractional_amount(self) -> None:
        event = _event(RawPayment(KIN, "S", "D", 1))
        assert PaymentInfo(event, "D", KIN).amount == Decimal("0.0001")

    def test_observer_on_neither_side_is_debit(self) -> None:
        event = _event(RawPayment(KIN, "S", "D", 10))
        info = PaymentInfo(event, "STRANGER", KIN)
        assert info.debit is True
        assert info.credit is False

    def test_skips_other_assets(self) -> None:
        event = _event(
            RawPayment(OTHER, "X", "Y", 99),
            RawPayment(KIN, "S", "D", 20000),
        )
        info = PaymentInfo(event, "D", KIN)
        assert info.source == "S"
        assert info.amount == Decimal(2)

    def test_selects_other_asset(self) -> None:
        event = _event(
            RawPayment(KIN, "S", "D", 20000),
            RawPayment(OTHER, "X", "Y", 30000),
        )
        info = PaymentInfo(event, "Y", OTHER)
        assert info.source == "X"
        assert info.amount == Decimal(3)
        assert info.credit is True


# ---------------------------------------------------------------------------
# No match
# ---------------------------------------------------------------------------


class TestNoMatch:
    def test_defaults(self) -> None:
        event = _event(RawPayment(KIN, "S", "D", 50000))
        info = PaymentInfo(event, "D", OTHER)
        assert info.amount == 0
        assert info.destination == ""
        assert info.source == "GEVENT"

    def test_empty_payments(self) -> None:
        info = PaymentInfo(_event(), "D", KIN)
        assert info.amount == Decimal(0)
        assert info.destination == ""
        assert info.source == "GEVENT"
        assert info.debit is True

    def test_empty_observer_is_credit_when_no_match(self) -> None:
        # "" == destination default: a quirk of the binary classification.
        info = PaymentInfo(_event(), "", KIN)
        assert info.credit is True


# ---------------------------------------------------------------------------
# First match only
# ---------------------------------------------------------------------------


class TestFirstMatch:
    def test_uses_first_payment(self) -> None:
        event = _event(
            RawPayment(KIN, "S1", "D1", 10000),
            RawPayment(KIN, "S2", "D2", 990000),
        )
        info = PaymentInfo(event, "D2", KIN)
        assert info.source == "S1"
        assert info.destination == "D1"
        assert info.amount == Decimal(1)
        assert info.debit is True


# ---------------------------------------------------------------------------
# Pass-through fields
# ---------------------------------------------------------------------------


class TestEventFields:
    def test_hash_and_created_at(self) -> None:
        info = PaymentInfo(_event(), "D", KIN)
        assert info.hash == "a" * 64
        assert info.created_at == CREATED_AT

    def test_memo_text(self) -> None:
        info = PaymentInfo(_event(), "D", KIN)
        assert info.memo_text == "1-abcd-hello"
        assert info.memo_data is None

    def test_memo_data(self) -> None:
        event = _event(memo_text=None, memo_data=b"\x00\x01")
        info = PaymentInfo(event, "D", KIN)
        assert info.memo_text is None
        assert info.memo_data == b"\x00\x01"

    def test_repr(self) -> None:
        event = _event(RawPayment(KIN, "S", "D", 50000))
        assert "credit" in repr(PaymentInfo(event, "D", KIN))


class TestAsset:
    def test_native(self) -> None:
        assert Asset.native().is_native
        assert Asset.native() == Asset.native()

    def test_exact_equality(self) -> None:
        assert Asset("USD", "GA") == Asset("USD", "GA")
        assert Asset("USD", "GA") != Asset("USD", "GB")
        assert Asset("USD", "GA") != Asset("usd", "GA")
        assert not Asset("USD", "GA").is_native
