"""
Application identifier.

The host application passes a four character id that tags every memo it
sends. The id is restricted to ASCII letters and digits, and the check is
made on the UTF-8 byte length, so a four code point string containing a
multi-byte character is rejected.

Invariants:
    - value matches [A-Za-z0-9]{4}.
    - len(value.encode("utf-8")) == 4.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from kin_core.errors import InvalidAppId

_APP_ID_RE = re.compile(r"[A-Za-z0-9]{4}")
_APP_ID_BYTES = 4


def _validate_app_id(value: object) -> None:
    """Raise InvalidAppId if value is not a well-formed app id."""
    if not isinstance(value, str):
        raise InvalidAppId(
            f"app id must be a string, got: {type(value).__name__}",
            details={"value": repr(value)},
        )
    if len(value.encode("utf-8")) != _APP_ID_BYTES:
        raise InvalidAppId(
            f"app id must be exactly {_APP_ID_BYTES} bytes, got: {value!r}",
            details={"value": value},
        )
    if not _APP_ID_RE.fullmatch(value):
        raise InvalidAppId(
            f"app id must contain only [A-Za-z0-9], got: {value!r}",
            details={"value": value},
        )


@dataclass(frozen=True)
class AppId:
    """A validated four character application id.

    Raises:
        InvalidAppId: If ``value`` is not 4 ASCII letters or digits.
    """

    value: str

    def __post_init__(self) -> None:
        _validate_app_id(self.value)

    @property
    def memo_prefix(self) -> str:
        """Memo tag for this app, e.g. ``"1-abcd-"``."""
        return f"1-{self.value}-"

    def __str__(self) -> str:
        return self.value
