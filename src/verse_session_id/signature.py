"""
Salted signatures over session payloads.

A signature set pairs an Ed25519ph signature with the random salt that was
hashed in front of the payload:

    digest    = SHA-512(salt || segment_0 || segment_1 || ...)
    signature = Ed25519ph(secret_key, digest, context="")

Fresh salt per signing keeps two signatures over the same payload distinct,
while each stays verifiable on its own.

Encodings:
    - binary:     signature (64 bytes) || salt (8 bytes), no length prefix
    - text:       base64 of the binary layout
    - structured: {"signature": "<base64>", "salt": "<base64>"}
"""

from __future__ import annotations

from typing import Iterable

from Crypto.Hash import SHA512
from typing_extensions import Self

from .types.base import StrictBaseModel
from .types.byte_arrays import Bytes8, Bytes64, b64decode, b64encode
from .types.constants import SIGNATURE_SALT_SIZE, SIGNATURE_SET_SIZE, SIGNATURE_SIZE
from .types.exceptions import ConvertError

__all__ = [
    "SignatureSet",
    "salted_digest",
]


def salted_digest(salt: bytes, payload: Iterable[bytes]) -> SHA512.SHA512Hash:
    """
    Hash the salt followed by every payload segment, in order.

    Signer and verifier must pass the same segments in the same order.

    Returns:
        The unfinalized SHA-512 hash object, as Ed25519ph expects it.
    """
    hasher = SHA512.new(salt)
    for segment in payload:
        hasher.update(segment)
    return hasher


class SignatureSet(StrictBaseModel):
    """An Ed25519ph signature and the salt it was made with."""

    signature: Bytes64
    """The 64-byte Ed25519ph signature."""

    salt: Bytes8
    """The 8-byte salt hashed in front of the payload."""

    def to_bytes(self) -> bytes:
        """Return the 72-byte `signature || salt` layout."""
        return bytes(self.signature) + bytes(self.salt)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Split the 72-byte `signature || salt` layout.

        Raises:
            ConvertError: If `data` is not exactly 72 bytes.
        """
        if len(data) != SIGNATURE_SET_SIZE:
            raise ConvertError(cls.__name__, expected=SIGNATURE_SET_SIZE, actual=len(data))
        return cls(
            signature=Bytes64(data[:SIGNATURE_SIZE]),
            salt=Bytes8(data[SIGNATURE_SIZE : SIGNATURE_SIZE + SIGNATURE_SALT_SIZE]),
        )

    def to_text(self) -> str:
        """Return the base64 text of the binary layout."""
        return b64encode(self.to_bytes())

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse the base64 text form.

        Raises:
            ConvertError: On invalid base64 or a decoded length other than 72.
        """
        return cls.from_bytes(b64decode(text, cls.__name__))

    def __str__(self) -> str:
        """Return the base64 text of the binary layout."""
        return self.to_text()
