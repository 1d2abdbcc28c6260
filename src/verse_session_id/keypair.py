"""
Ed25519 keypair behind a session id, and the signature checks against it.

The session id is the keypair's public key, so anyone holding the id can check
a signature set without further key exchange. Signing and verification both
use the prehashed variant (Ed25519ph, RFC 8032) with an empty context over the
salted digest built by `salted_digest`.

The keypair lives only in the signer's process. It cannot be exported or
loaded back; key storage belongs to the host application.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Sequence

from Crypto.PublicKey.ECC import EccKey
from Crypto.Signature import eddsa

from .compat import debug_fingerprint
from .session_id import SessionId
from .signature import SignatureSet, salted_digest
from .types.byte_arrays import Bytes8, Bytes64
from .types.constants import SECRET_KEY_SIZE, SIGNATURE_SALT_SIZE
from .types.exceptions import SessionIdError, SignatureError

__all__ = [
    "SessionIdPair",
    "verify",
    "verify_string",
]

logger = logging.getLogger(__name__)

SIGNING_MODE = "rfc8032"
"""pycryptodome EdDSA mode. A SHA-512 hash object as input selects Ed25519ph."""


@dataclass(frozen=True, slots=True)
class SessionIdPair:
    """
    Ed25519 keypair whose public half is a session id.

    Attributes:
        private_key: The Ed25519 private key.
    """

    private_key: EccKey = field(repr=False)

    @classmethod
    def generate(cls) -> SessionIdPair:
        """
        Generate a new keypair from 32 bytes of OS randomness.

        Returns:
            A fresh keypair.

        Raises:
            SignatureError: If the primitive rejects the seed.
        """
        seed = secrets.token_bytes(SECRET_KEY_SIZE)
        try:
            private_key = eddsa.import_private_key(seed)
        except ValueError as e:
            raise SignatureError(str(e), location="SessionIdPair.generate") from e

        pair = cls(private_key=private_key)
        logger.debug("Generated session id %s", pair.get_id().debug_fingerprint())
        return pair

    def get_id(self) -> SessionId:
        """Return the session id, i.e. the 32-byte public key."""
        return SessionId(self.private_key.public_key().export_key(format="raw"))

    def sign(self, payload: Sequence[bytes]) -> SignatureSet:
        """
        Sign the payload segments under a fresh salt.

        Args:
            payload: Ordered byte segments. The verifier must supply the same
                segments in the same order.

        Returns:
            The signature and the salt it was made with.

        Raises:
            SignatureError: If the primitive fails to sign.
        """
        salt = secrets.token_bytes(SIGNATURE_SALT_SIZE)
        digest = salted_digest(salt, payload)
        try:
            signature = eddsa.new(self.private_key, SIGNING_MODE).sign(digest)
        except (TypeError, ValueError) as e:
            raise SignatureError(str(e), location="SessionIdPair.sign") from e

        return SignatureSet(signature=Bytes64(signature), salt=Bytes8(salt))

    def __repr__(self) -> str:
        return f"SessionIdPair({self.get_id().debug_fingerprint()})"


def verify(session_id: SessionId, payload: Sequence[bytes], sigset: SignatureSet) -> None:
    """
    Check a signature set against a session id and payload.

    No value is special-cased: malformed keys, all-zero salts or signatures and
    plain mismatches are all rejected by the primitive itself.

    Args:
        session_id: Public key of the claimed signer.
        payload: The payload segments, in signing order.
        sigset: The signature and salt to check.

    Raises:
        SignatureError: If the session id is not a valid public key or the
            signature does not verify.
    """
    try:
        public_key = eddsa.import_public_key(bytes(session_id))
    except ValueError as e:
        raise SignatureError(f"invalid public key: {e}", location="verify") from e

    digest = salted_digest(bytes(sigset.salt), payload)
    try:
        eddsa.new(public_key, SIGNING_MODE).verify(digest, bytes(sigset.signature))
    except ValueError as e:
        logger.debug(
            "Signature rejected for session id %s: %s",
            debug_fingerprint(session_id),
            e,
        )
        raise SignatureError(f"verification failed: {e}", location="verify") from e


def verify_string(session_id: str, signature: str, data: str) -> bool:
    """
    Verify text-encoded inputs over a single UTF-8 payload segment.

    Args:
        session_id: Base64 session id.
        signature: Base64 signature set.
        data: The signed text.

    Returns:
        True if everything parses and the signature verifies, False otherwise.
    """
    try:
        sid = SessionId.parse_text(session_id)
        sigset = SignatureSet.parse(signature)
        verify(sid, [data.encode("utf-8")], sigset)
    except SessionIdError:
        return False
    return True
