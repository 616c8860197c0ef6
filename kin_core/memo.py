"""
Memo tagging.

Outgoing memos carry the sending application's id as a prefix:

    1-XXXX-<payload>

where XXXX is exactly four ASCII letters or digits. Tagging is idempotent
against any well-formed prefix, including one written by a different app,
so a memo is never tagged twice.

The tagger does not enforce a length cap. Callers that build transactions
can check the result with validate_memo_size(); the network itself rejects
text memos longer than MAX_MEMO_BYTES.
"""

from __future__ import annotations

import re

from kin_core.app_id import AppId

# Anchored at the start; anything may follow the trailing dash.
_TAGGED_MEMO_RE = re.compile(r"^1-[A-Za-z0-9]{4}-")

# Maximum size of a text memo on the ledger, in UTF-8 bytes.
MAX_MEMO_BYTES = 28


def is_tagged(memo: str) -> bool:
    """True if memo already starts with a ``1-XXXX-`` tag."""
    return _TAGGED_MEMO_RE.match(memo) is not None


def prepend_app_id_if_needed(app_id: AppId, memo: str) -> str:
    """Tag memo with app_id unless it already carries a tag.

    Args:
        app_id: The sending application's id.
        memo: Free-form memo text, possibly already tagged.

    Returns:
        memo unchanged if it starts with any ``1-XXXX-`` tag, otherwise
        ``app_id.memo_prefix + memo``.
    """
    if is_tagged(memo):
        return memo
    return app_id.memo_prefix + memo


def validate_memo_size(memo: str) -> bool:
    """Check that memo fits in a ledger text memo.

    Returns:
        True if the UTF-8 encoding is at most MAX_MEMO_BYTES.
    """
    return len(memo.encode("utf-8")) <= MAX_MEMO_BYTES
