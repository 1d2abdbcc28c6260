"""Exception hierarchy for session ids and signatures."""

from __future__ import annotations


class SessionIdError(Exception):
    """
    Base exception for all session id errors.

    Attributes:
        message: Human-readable error description.
        location: The operation that raised the error, if recorded.
    """

    def __init__(self, message: str, *, location: str | None = None) -> None:
        self.message = message
        self.location = location
        super().__init__(f"{message} ({location})" if location else message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, location={self.location!r})"


class SignatureError(SessionIdError):
    """
    Raised when the signature primitive rejects key material or a signature.

    The primitive's own exception is chained as `__cause__`.

    Attributes:
        detail: What the primitive rejected.
        location: The operation where the rejection happened.
    """

    def __init__(self, detail: str, *, location: str) -> None:
        self.detail = detail
        super().__init__(f"signature error: {detail}", location=location)


class ConvertError(SessionIdError, ValueError):
    """
    Raised when a fixed-size value cannot be built from its input.

    Covers wrong byte counts, invalid base64 and wrong decoded field sizes.
    Subclasses `ValueError` so pydantic reports it as a validation error.

    Attributes:
        type_name: The type being built.
        expected: The required byte length, if the failure was a length mismatch.
        actual: The length received, if the failure was a length mismatch.
    """

    def __init__(
        self,
        type_name: str,
        *,
        expected: int | None = None,
        actual: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual

        if expected is not None and actual is not None:
            msg = f"{type_name} expects exactly {expected} bytes, got {actual}"
        elif detail:
            msg = f"cannot convert to {type_name}: {detail}"
        else:
            msg = f"cannot convert to {type_name}"

        super().__init__(msg)


class RequiredError(SessionIdError):
    """Raised when a session id was required but none was present."""

    def __init__(self, what: str = "session id", *, location: str | None = None) -> None:
        self.what = what
        super().__init__(f"required {what} is absent", location=location)
