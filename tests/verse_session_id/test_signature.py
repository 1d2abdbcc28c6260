"""Tests for signature set encodings and the salted digest."""

import base64
import hashlib
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from verse_session_id import ConvertError, SignatureSet, salted_digest
from verse_session_id.types import Bytes8, Bytes64


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode()


@pytest.fixture
def fixed_sigset() -> SignatureSet:
    return SignatureSet(signature=Bytes64(b"\x01" * 64), salt=Bytes8(b"\x02" * 8))


class TestBinaryForm:
    """Tests for the 72-byte `signature || salt` layout."""

    def test_layout(self, fixed_sigset: SignatureSet) -> None:
        """Signature comes first, salt last, no prefix."""
        assert fixed_sigset.to_bytes() == b"\x01" * 64 + b"\x02" * 8

    def test_from_bytes(self, fixed_sigset: SignatureSet) -> None:
        """The layout splits back into both fields."""
        assert SignatureSet.from_bytes(b"\x01" * 64 + b"\x02" * 8) == fixed_sigset

    @pytest.mark.parametrize("size", [0, 64, 71, 73])
    def test_wrong_length(self, size: int) -> None:
        """Anything but 72 bytes is rejected."""
        with pytest.raises(ConvertError, match=f"SignatureSet expects exactly 72 bytes, got {size}"):
            SignatureSet.from_bytes(b"\x00" * size)


class TestTextForm:
    """Tests for the base64 text form."""

    def test_text_is_base64_of_layout(self, fixed_sigset: SignatureSet) -> None:
        """`str` and `to_text` encode the binary layout."""
        assert str(fixed_sigset) == fixed_sigset.to_text() == _b64(fixed_sigset.to_bytes())

    def test_parse(self, fixed_sigset: SignatureSet) -> None:
        """The text form parses back."""
        assert SignatureSet.parse(str(fixed_sigset)) == fixed_sigset

    @pytest.mark.parametrize("size", [71, 73])
    def test_parse_wrong_length(self, size: int) -> None:
        """Valid base64 of the wrong length is rejected."""
        with pytest.raises(ConvertError):
            SignatureSet.parse(_b64(b"\x00" * size))

    def test_parse_invalid_base64(self) -> None:
        """Text that is not base64 is rejected."""
        with pytest.raises(ConvertError, match="invalid base64"):
            SignatureSet.parse("@" * 96)


class TestStructuredForm:
    """Tests for the JSON object form."""

    def test_dump(self, fixed_sigset: SignatureSet) -> None:
        """Each field is the base64 text of its bytes."""
        expected = {"signature": _b64(b"\x01" * 64), "salt": _b64(b"\x02" * 8)}
        assert fixed_sigset.model_dump() == expected
        assert json.loads(fixed_sigset.model_dump_json()) == expected

    def test_load_ignores_field_order(self, fixed_sigset: SignatureSet) -> None:
        """Fields may appear in any order."""
        doc = json.dumps({"salt": _b64(b"\x02" * 8), "signature": _b64(b"\x01" * 64)})
        assert SignatureSet.model_validate_json(doc) == fixed_sigset

    def test_load_from_raw_bytes(self, fixed_sigset: SignatureSet) -> None:
        """Python input may carry raw bytes instead of text."""
        loaded = SignatureSet.model_validate({"signature": b"\x01" * 64, "salt": b"\x02" * 8})
        assert loaded == fixed_sigset

    @pytest.mark.parametrize(
        "field, value",
        [
            ("signature", _b64(b"\x01" * 63)),
            ("signature", "not base64"),
            ("salt", _b64(b"\x02" * 9)),
            ("salt", "!!"),
        ],
    )
    def test_load_rejects_bad_field(self, field: str, value: str) -> None:
        """Bad base64 or a wrong size fails at the offending field."""
        doc = {"signature": _b64(b"\x01" * 64), "salt": _b64(b"\x02" * 8), field: value}
        with pytest.raises(ValidationError) as exc_info:
            SignatureSet.model_validate_json(json.dumps(doc))
        assert [err["loc"] for err in exc_info.value.errors()] == [(field,)]

    def test_load_rejects_unknown_and_missing_fields(self) -> None:
        """The object has exactly two fields."""
        with pytest.raises(ValidationError):
            SignatureSet.model_validate_json(json.dumps({"signature": _b64(b"\x01" * 64)}))
        with pytest.raises(ValidationError):
            SignatureSet.model_validate_json(
                json.dumps(
                    {
                        "signature": _b64(b"\x01" * 64),
                        "salt": _b64(b"\x02" * 8),
                        "extra": "x",
                    }
                )
            )

    @given(st.binary(min_size=64, max_size=64), st.binary(min_size=8, max_size=8))
    def test_roundtrip(self, signature: bytes, salt: bytes) -> None:
        """Both text and structured forms round-trip any field values."""
        sigset = SignatureSet(signature=Bytes64(signature), salt=Bytes8(salt))
        assert SignatureSet.parse(sigset.to_text()) == sigset
        assert SignatureSet.model_validate_json(sigset.model_dump_json()) == sigset


class TestValueSemantics:
    """Tests for equality, immutability and hashing."""

    def test_equality_needs_both_fields(self, fixed_sigset: SignatureSet) -> None:
        """Changing either field breaks equality."""
        other_salt = SignatureSet(signature=fixed_sigset.signature, salt=Bytes8.zero())
        other_sig = SignatureSet(signature=Bytes64.zero(), salt=fixed_sigset.salt)
        assert fixed_sigset != other_salt
        assert fixed_sigset != other_sig

    def test_frozen(self, fixed_sigset: SignatureSet) -> None:
        """Fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            fixed_sigset.salt = Bytes8.zero()  # type: ignore[misc]

    def test_hashable(self, fixed_sigset: SignatureSet) -> None:
        """Equal sets hash equally."""
        copy = SignatureSet.from_bytes(fixed_sigset.to_bytes())
        assert hash(copy) == hash(fixed_sigset)
        assert len({copy, fixed_sigset}) == 1


class TestSaltedDigest:
    """Tests for the digest shared by signer and verifier."""

    def test_matches_sha512_of_concatenation(self) -> None:
        """The digest covers salt then every segment in order."""
        salt = b"\x09" * 8
        digest = salted_digest(salt, [b"1234", b"testdata"])
        assert digest.digest() == hashlib.sha512(salt + b"1234testdata").digest()

    def test_empty_payload(self) -> None:
        """With no segments only the salt is hashed."""
        assert salted_digest(b"\x00" * 8, []).digest() == hashlib.sha512(b"\x00" * 8).digest()

    def test_segment_order_matters(self) -> None:
        """Reordering segments changes the digest."""
        salt = b"\x09" * 8
        a = salted_digest(salt, [b"1234", b"testdata"]).digest()
        b = salted_digest(salt, [b"testdata", b"1234"]).digest()
        assert a != b
