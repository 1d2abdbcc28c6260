"""Sizes and fixed strings shared across the library."""

from __future__ import annotations

from typing import Final

SESSION_ID_SIZE: Final = 32
"""Bytes in a session id (an Ed25519 public key)."""

SECRET_KEY_SIZE: Final = 32
"""Bytes of randomness seeding an Ed25519 private key."""

SIGNATURE_SIZE: Final = 64
"""Bytes in an Ed25519 signature."""

SIGNATURE_SALT_SIZE: Final = 8
"""Bytes of random salt mixed into every signed digest."""

SIGNATURE_SET_SIZE: Final = SIGNATURE_SIZE + SIGNATURE_SALT_SIZE
"""Bytes in the binary `signature || salt` layout of a signature set."""

DEBUG_FINGERPRINT_LENGTH: Final = 7
"""Characters of base64 kept by the debug fingerprint."""

NO_ID_PLACEHOLDER: Final = "<NOID>"
"""Debug fingerprint of an absent session id."""
