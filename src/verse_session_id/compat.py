"""
Session ids that may or may not be present.

Callers often hold a session id in a looser form: a raw buffer read off the
wire, an optional buffer for a peer that has not identified itself yet, or an
optional `SessionId`. `MaybeSessionId` folds all of these into one two-case
value (present bytes of any length, or absent), and the free functions below
compare and print such values without caring which form they came from.

    >>> eq_slice(None, None)
    True
    >>> debug_fingerprint(None)
    '<NOID>'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .session_id import SessionId, compare_session_ids
from .types.byte_arrays import b64encode
from .types.constants import DEBUG_FINGERPRINT_LENGTH, NO_ID_PLACEHOLDER
from .types.exceptions import RequiredError

__all__ = [
    "ABSENT",
    "MaybeSessionId",
    "SessionIdSource",
    "debug_fingerprint",
    "eq_slice",
    "to_session_id",
]


@dataclass(frozen=True, slots=True)
class MaybeSessionId:
    """
    A byte buffer that is either present (of any length) or absent.

    Attributes:
        data: The buffer, or None when absent.
    """

    data: bytes | None = None

    @classmethod
    def of(cls, source: SessionIdSource) -> MaybeSessionId:
        """
        Convert any supported source.

        Buffers and `SessionId` values are present. `None` is absent, which
        covers both an optional buffer and an optional `SessionId` that is unset.
        """
        if isinstance(source, MaybeSessionId):
            return source
        if source is None:
            return ABSENT
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls(bytes(source))
        raise TypeError(f"Cannot treat {type(source).__name__} as a session id")

    @property
    def is_present(self) -> bool:
        """Whether a buffer is held."""
        return self.data is not None


ABSENT: MaybeSessionId = MaybeSessionId()
"""The absent value."""

SessionIdSource: TypeAlias = "SessionId | bytes | bytearray | memoryview | MaybeSessionId | None"
"""Everything `MaybeSessionId.of` accepts."""


def to_session_id(source: SessionIdSource) -> SessionId:
    """
    Require a well-formed session id.

    Raises:
        RequiredError: If the source is absent.
        ConvertError: If the source is present but not exactly 32 bytes.
    """
    data = MaybeSessionId.of(source).data
    if data is None:
        raise RequiredError(location="to_session_id")
    if isinstance(source, SessionId):
        return source
    return SessionId.parse(data)


def eq_slice(a: SessionIdSource, b: SessionIdSource) -> bool:
    """
    Compare two possibly absent session ids.

    Two absent values are equal, an absent and a present value are not, and
    two present buffers are equal when their lengths and bytes match.
    """
    x = MaybeSessionId.of(a).data
    y = MaybeSessionId.of(b).data
    if x is None or y is None:
        return x is None and y is None
    return compare_session_ids(x, y) == 0


def debug_fingerprint(source: SessionIdSource) -> str:
    """Return the first seven base64 characters of the buffer, or `<NOID>` when absent."""
    data = MaybeSessionId.of(source).data
    if data is None:
        return NO_ID_PLACEHOLDER
    return b64encode(data)[:DEBUG_FINGERPRINT_LENGTH]
