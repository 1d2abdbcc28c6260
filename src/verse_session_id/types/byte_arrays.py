"""
Fixed-length byte types.

Every fixed-size value in the library (session ids, signatures, salts) is a
`BaseBytes` subclass: an immutable `bytes` object whose length is checked on
construction and whose text form is standard, padded base64.
"""

from __future__ import annotations

import base64
from typing import Any, ClassVar, Iterable

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import ConvertError


def b64encode(data: bytes) -> str:
    """Encode bytes as standard, padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str, type_name: str = "bytes") -> bytes:
    """
    Decode standard, padded base64 text.

    Raises:
        ConvertError: If the text is not valid base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        raise ConvertError(type_name, detail=f"invalid base64 string {text!r}") from e


def _coerce_to_bytes(value: Any, type_name: str) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Base64 text
      - Iterables of integers in [0, 255]

    Raises:
      ConvertError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return b64decode(value, type_name)
    if isinstance(value, Iterable):
        try:
            # bytearray(iterable) enforces each element is an int in 0..255
            return bytes(bytearray(value))
        except (TypeError, ValueError) as e:
            raise ConvertError(type_name, detail=str(e)) from e
    raise ConvertError(type_name, detail=f"unsupported input type {type(value).__name__}")


def as_buffer(value: Any, type_name: str = "bytes") -> bytes:
    """
    Accept only byte buffers, returned as immutable `bytes`.

    Raises:
        ConvertError: If `value` is not `bytes`, `bytearray` or `memoryview`.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ConvertError(type_name, detail=f"expected a byte buffer, got {type(value).__name__}")
    return bytes(value)


class BaseBytes(bytes):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.

    Equality and ordering are those of `bytes`: exact content equality and
    unsigned, byte-wise lexicographic order. Because every instance of a
    subclass has the same length, that order is total over the subclass.
    Hashing follows `bytes` too, so an instance and an equal plain buffer are
    interchangeable as dict keys.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new instance.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            ConvertError: If the resulting byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value, cls.__name__)
        if len(b) != cls.LENGTH:
            raise ConvertError(cls.__name__, expected=cls.LENGTH, actual=len(b))
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a new instance filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse `data` as a value of this type.

        Raises:
            ConvertError: If `data` is not exactly `LENGTH` bytes.
        """
        if len(data) != cls.LENGTH:
            raise ConvertError(cls.__name__, expected=cls.LENGTH, actual=len(data))
        return cls(data)

    def to_base64(self) -> str:
        """Return the canonical base64 text of the bytes."""
        return b64encode(self)

    @classmethod
    def from_base64(cls, text: str) -> Self:
        """
        Parse the base64 text form.

        Raises:
            ConvertError: On invalid base64 or a wrong decoded length.
        """
        return cls.decode_bytes(b64decode(text, cls.__name__))

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. Instances of the class are accepted as-is.
        2. Raw bytes and base64 text are coerced, with the exact LENGTH enforced.
        3. For serialization (e.g., to JSON), convert to base64 text.
        """
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.to_base64()),
        )

    def __str__(self) -> str:
        """Return the base64 text of the bytes."""
        return self.to_base64()

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def __hash__(self) -> int:
        """Return the hash of the bytes, matching `bytes` equality."""
        return hash(bytes(self))


class Bytes8(BaseBytes):
    """Fixed-size byte array of exactly 8 bytes."""

    LENGTH = 8


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32


class Bytes64(BaseBytes):
    """Fixed-size byte array of exactly 64 bytes."""

    LENGTH = 64
