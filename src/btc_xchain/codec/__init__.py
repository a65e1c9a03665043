"""Primitive codec and the record base class."""

from btc_xchain.codec.primitives import Sink, Source, encode_varint
from btc_xchain.codec.record import Record, decoding

__all__ = ["Record", "Sink", "Source", "decoding", "encode_varint"]
