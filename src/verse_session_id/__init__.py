"""
Session ids with salted Ed25519ph signatures.

A session id is the Ed25519 public key of a session endpoint. The endpoint
proves it owns the id by signing payload data; anyone holding the id can check
the signature.

Usage::

    from verse_session_id import SessionId, SessionIdPair, SignatureSet

    pair = SessionIdPair.generate()
    sigset = pair.sign([b"1234", b"testdata"])

    # Ship str(pair.get_id()) and str(sigset) to the verifier, then:
    session_id = SessionId.parse_text(session_id_text)
    session_id.verify([b"1234", b"testdata"], SignatureSet.parse(sigset_text))
"""

from .compat import (
    ABSENT,
    MaybeSessionId,
    SessionIdSource,
    debug_fingerprint,
    eq_slice,
    to_session_id,
)
from .keypair import SessionIdPair, verify, verify_string
from .session_id import SessionId, compare_session_ids
from .signature import SignatureSet, salted_digest
from .types.constants import SESSION_ID_SIZE, SIGNATURE_SALT_SIZE, SIGNATURE_SIZE
from .types.exceptions import ConvertError, RequiredError, SessionIdError, SignatureError

__all__ = [
    # Session ids
    "SessionId",
    "compare_session_ids",
    "SESSION_ID_SIZE",
    # Signing
    "SessionIdPair",
    "SignatureSet",
    "salted_digest",
    "verify",
    "verify_string",
    "SIGNATURE_SIZE",
    "SIGNATURE_SALT_SIZE",
    # Possibly absent session ids
    "ABSENT",
    "MaybeSessionId",
    "SessionIdSource",
    "debug_fingerprint",
    "eq_slice",
    "to_session_id",
    # Exceptions
    "SessionIdError",
    "SignatureError",
    "ConvertError",
    "RequiredError",
]
