"""CodecError and friends: every failure the codec can report."""

from __future__ import annotations


class CodecError(Exception):
    """Base error for all encode/decode operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "codec-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class EndOfDataError(CodecError):
    """A primitive read ran out of bytes before completing its value."""

    def __init__(self, needed: int, remaining: int) -> None:
        super().__init__(
            f"unexpected end of data (need {needed} bytes, {remaining} remaining)",
            code="end-of-data",
        )
        self.needed = needed
        self.remaining = remaining


class MalformedDataError(CodecError):
    """Input that cannot be decoded at all, e.g. invalid hex."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="malformed-data")


class FieldDecodeError(CodecError):
    """Decoding of a record field failed.

    Nested records wrap the child's error, so the message reads from the
    outermost record down to the primitive that failed.

    Attributes:
        record: Name of the record being decoded.
        field: Name of the field that failed (``utxos[3]`` for elements).
        cause: The underlying :class:`CodecError`.
    """

    def __init__(self, record: str, field: str, cause: CodecError) -> None:
        super().__init__(f"{record} deserialize {field} error: {cause}", code="field-decode")
        self.record = record
        self.field = field
        self.cause = cause

    @property
    def root_cause(self) -> CodecError:
        """The innermost error in the wrapping chain."""
        err: CodecError = self
        while isinstance(err, FieldDecodeError):
            err = err.cause
        return err

    @property
    def path(self) -> list[str]:
        """``record.field`` steps from the outermost record inwards."""
        steps: list[str] = []
        err: CodecError = self
        while isinstance(err, FieldDecodeError):
            steps.append(f"{err.record}.{err.field}")
            err = err.cause
        return steps


class TrailingDataError(CodecError):
    """A record decoded successfully but bytes were left over."""

    def __init__(self, record: str, extra: int) -> None:
        super().__init__(
            f"{record} deserialize error: {extra} trailing bytes after record",
            code="trailing-data",
        )
        self.record = record
        self.extra = extra
