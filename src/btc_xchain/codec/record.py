"""Record base class shared by every bridge record type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Self

from btc_xchain.codec.primitives import Sink, Source
from btc_xchain.config.settings import get_config
from btc_xchain.errors.codec_errors import (
    CodecError,
    FieldDecodeError,
    MalformedDataError,
    TrailingDataError,
)


@contextmanager
def decoding(record: str, field: str) -> Iterator[None]:
    """Attach ``record``/``field`` context to any codec error raised inside.

    Usage::

        with decoding("OutPoint", "hash"):
            hash_ = source.next_var_bytes()
    """
    try:
        yield
    except CodecError as exc:
        raise FieldDecodeError(record, field, exc) from exc


class Record(ABC):
    """Base for records with a fixed wire layout.

    Subclasses implement :meth:`serialize` and :meth:`deserialize`; the
    bytes and hex helpers are built on top of those two.
    """

    @abstractmethod
    def serialize(self, sink: Sink) -> None:
        """Write the record's fields to ``sink`` in wire order."""

    @classmethod
    @abstractmethod
    def deserialize(cls, source: Source) -> Self:
        """Read a record from ``source``, raising :class:`FieldDecodeError` on failure."""

    def to_bytes(self) -> bytes:
        """Serialize the record to raw bytes."""
        sink = Sink()
        self.serialize(sink)
        return sink.getvalue()

    def to_hex(self) -> str:
        """Serialize to hex string."""
        return self.to_bytes().hex()

    @classmethod
    def from_bytes(cls, data: bytes, *, strict: bool | None = None) -> Self:
        """Deserialize a record from raw bytes.

        Args:
            data: Encoded record.
            strict: Reject bytes left over after the record. Defaults to
                the ``reject_trailing_bytes`` setting, which is only read
                when bytes are actually left over.

        Raises:
            FieldDecodeError: A field could not be decoded.
            TrailingDataError: ``strict`` is set and input was not consumed.
            pydantic.ValidationError: The setting had to be read and the
                ``BTC_XCHAIN_*`` environment is invalid.
        """
        source = Source(data)
        record = cls.deserialize(source)
        if not source.remaining:
            return record
        if strict is None:
            strict = get_config().reject_trailing_bytes
        if strict:
            raise TrailingDataError(cls.__name__, source.remaining)
        return record

    @classmethod
    def from_hex(cls, hex_str: str, *, strict: bool | None = None) -> Self:
        """Deserialize a record from a hex string."""
        try:
            raw = bytes.fromhex(hex_str)
        except ValueError as exc:
            msg = f"{cls.__name__}: invalid hex input: {exc}"
            raise MalformedDataError(msg) from exc
        return cls.from_bytes(raw, strict=strict)
