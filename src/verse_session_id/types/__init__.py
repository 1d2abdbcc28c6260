"""Reusable type definitions for session ids and signatures."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes8, Bytes32, Bytes64
from .exceptions import (
    ConvertError,
    RequiredError,
    SessionIdError,
    SignatureError,
)

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes8",
    "Bytes32",
    "Bytes64",
    "StrictBaseModel",
    # Exceptions
    "SessionIdError",
    "SignatureError",
    "ConvertError",
    "RequiredError",
]
