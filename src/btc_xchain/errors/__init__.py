"""Codec error taxonomy."""

from btc_xchain.errors.codec_errors import (
    CodecError,
    EndOfDataError,
    FieldDecodeError,
    MalformedDataError,
    TrailingDataError,
)

__all__ = [
    "CodecError",
    "EndOfDataError",
    "FieldDecodeError",
    "MalformedDataError",
    "TrailingDataError",
]
