"""
Session id: the public identity of a session endpoint.

A session id is the 32-byte Ed25519 public key of the endpoint's keypair.
Its text form is standard base64; its debug fingerprint is the first seven
characters of that text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .types.byte_arrays import Bytes32, as_buffer, b64encode
from .types.constants import DEBUG_FINGERPRINT_LENGTH, SESSION_ID_SIZE

if TYPE_CHECKING:
    from .signature import SignatureSet

__all__ = [
    "SessionId",
    "compare_session_ids",
]


def compare_session_ids(a: bytes, b: bytes) -> int:
    """
    Compare two byte buffers that should hold session ids.

    Buffers of different lengths order by length, shorter first. Buffers of the
    same length compare byte by byte as unsigned values and the first
    difference decides.

    Returns:
        A negative number, zero or a positive number as `a` sorts before,
        equal to or after `b`.
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return 0


class SessionId(Bytes32):
    """
    Session id of exactly 32 bytes, equal to an Ed25519 public key.

    Instances are immutable and usable as dict keys and sort keys.
    """

    LENGTH = SESSION_ID_SIZE

    @classmethod
    def from_raw(cls, raw: bytes) -> SessionId:
        """Wrap 32 raw bytes."""
        return cls(raw)

    @classmethod
    def parse(cls, data: bytes) -> SessionId:
        """
        Parse raw bytes as a session id.

        Raises:
            ConvertError: If `data` is not a byte buffer of exactly 32 bytes.
        """
        return cls.decode_bytes(as_buffer(data, cls.__name__))

    @classmethod
    def parse_text(cls, text: str) -> SessionId:
        """
        Parse the base64 text form.

        Raises:
            ConvertError: On invalid base64 or a decoded length other than 32.
        """
        return cls.from_base64(text)

    def to_text(self) -> str:
        """Return the canonical base64 text."""
        return self.to_base64()

    def to_vec(self) -> bytes:
        """Return the raw bytes as a plain `bytes` object."""
        return bytes(self)

    def debug_fingerprint(self) -> str:
        """
        Return a short, lossy form for logs.

        Distinct session ids may share a fingerprint, so it is never compared.
        """
        return b64encode(self)[:DEBUG_FINGERPRINT_LENGTH]

    def cmp_slice(self, other: bytes) -> int:
        """
        Compare against any byte buffer (see `compare_session_ids`).

        Raises:
            ConvertError: If `other` is not a byte buffer.
        """
        return compare_session_ids(self, as_buffer(other))

    def eq_slice(self, other: bytes) -> bool:
        """Check byte equality against any byte buffer."""
        return self.cmp_slice(other) == 0

    def verify(self, payload: Sequence[bytes], sigset: SignatureSet) -> None:
        """
        Verify a signature set made by the keypair owning this session id.

        Raises:
            SignatureError: If the signature does not verify.
        """
        from .keypair import verify

        verify(self, payload, sigset)

    def __repr__(self) -> str:
        """Show the debug fingerprint rather than the full key."""
        return f"SessionId({self.debug_fingerprint()})"
