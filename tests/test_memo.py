"""
Tests for memo tagging.

Test plan:
- Untagged memos get the app's prefix
- Memos tagged by this app or another app are returned unchanged
- Double application is a no-op
- Malformed prefixes (short tag, punctuation, missing dash, wrong
  version, not at start) are tagged
- Empty memo is tagged
- No length cap in the tagger; validate_memo_size checks bytes
"""

import pytest

from kin_core.app_id import AppId
from kin_core.memo import (
    MAX_MEMO_BYTES,
    is_tagged,
    prepend_app_id_if_needed,
    validate_memo_size,
)

APP = AppId("abcd")


class TestTagging:
    def test_prepends_prefix(self) -> None:
        assert prepend_app_id_if_needed(APP, "hello") == "1-abcd-hello"

    def test_empty_memo(self) -> None:
        assert prepend_app_id_if_needed(APP, "") == "1-abcd-"

    @pytest.mark.parametrize(
        "memo",
        [
            "1-abc-hello",     # tag too short
            "1-ab_d-hello",    # punctuation in tag
            "1-abcdhello",     # missing trailing dash
            "2-abcd-hello",    # wrong version
            " 1-abcd-hello",   # not at start
            "1-[]^_-hello",    # chars between Z and a
            "1-abcé-hello",    # non-ASCII in tag
            "x1-abcd-",
        ],
    )
    def test_malformed_prefix_is_tagged(self, memo: str) -> None:
        assert prepend_app_id_if_needed(APP, memo) == "1-abcd-" + memo

    def test_no_length_cap(self) -> None:
        memo = "x" * 500
        assert prepend_app_id_if_needed(APP, memo) == "1-abcd-" + memo


class TestIdempotence:
    @pytest.mark.parametrize(
        "memo",
        ["1-abcd-hello", "1-abcd-", "1-ZZ99-other app", "1-wxyz-1-abcd-nested"],
    )
    def test_already_tagged_unchanged(self, memo: str) -> None:
        assert prepend_app_id_if_needed(APP, memo) == memo

    def test_other_app_tag_kept(self) -> None:
        memo = prepend_app_id_if_needed(AppId("WXYZ"), "payment")
        assert prepend_app_id_if_needed(APP, memo) == "1-WXYZ-payment"

    @pytest.mark.parametrize("memo", ["", "hello", "1-abc-", "1-abcd-x", "2-abcd-"])
    def test_double_application_is_noop(self, memo: str) -> None:
        once = prepend_app_id_if_needed(APP, memo)
        assert prepend_app_id_if_needed(APP, once) == once

    def test_multiline_payload(self) -> None:
        memo = "1-abcd-\nline two"
        assert prepend_app_id_if_needed(APP, memo) == memo


class TestIsTagged:
    def test_tagged(self) -> None:
        assert is_tagged("1-a1B2-")

    def test_untagged(self) -> None:
        assert not is_tagged("hello")


class TestMemoSize:
    def test_within_limit(self) -> None:
        assert validate_memo_size("1-abcd-" + "x" * (MAX_MEMO_BYTES - 7))

    def test_over_limit(self) -> None:
        assert not validate_memo_size("1-abcd-" + "x" * (MAX_MEMO_BYTES - 6))

    def test_counts_bytes_not_chars(self) -> None:
        memo = "é" * 15  # 15 chars, 30 bytes
        assert len(memo) <= MAX_MEMO_BYTES
        assert not validate_memo_size(memo)
