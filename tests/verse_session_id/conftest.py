"""Shared fixtures for session id tests."""

import pytest

from verse_session_id import SessionIdPair, SignatureSet


@pytest.fixture
def payload() -> list[bytes]:
    """Payload segments signed in the round-trip tests."""
    return [b"1234", b"testdata"]


@pytest.fixture
def pair() -> SessionIdPair:
    """A freshly generated keypair."""
    return SessionIdPair.generate()


@pytest.fixture
def sigset(pair: SessionIdPair, payload: list[bytes]) -> SignatureSet:
    """A signature set over `payload` made by `pair`."""
    return pair.sign(payload)
