"""Unspent outputs: OutPoint, Utxo and the Utxos collection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Self

from btc_xchain.btc.ordering import sort_utxos
from btc_xchain.codec.primitives import Sink, Source
from btc_xchain.codec.record import Record, decoding

# ---------------------------------------------------------------------------
# OutPoint
# ---------------------------------------------------------------------------


@dataclass
class OutPoint(Record):
    """A reference to a previous transaction output.

    Attributes:
        hash: Transaction identifier, opaque bytes of any length.
        index: Output index (uint32).
    """

    hash: bytes
    index: int

    def serialize(self, sink: Sink) -> None:
        sink.write_var_bytes(self.hash)
        sink.write_uint32(self.index)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("OutPoint", "hash"):
            hash_ = source.next_var_bytes()
        with decoding("OutPoint", "index"):
            index = source.next_uint32()
        return cls(hash=hash_, index=index)


# ---------------------------------------------------------------------------
# Utxo
# ---------------------------------------------------------------------------


@dataclass
class Utxo(Record):
    """A spendable output plus bridge bookkeeping.

    Attributes:
        outpoint: Previous txid and output index.
        at_height: Block height the output confirmed at, 0 for unconfirmed.
        value: Amount in satoshis; higher is better for selection.
        script_pubkey: Output locking script.
        confirmations: Confirmation count from live chain state. Only used
            for ranking; never serialized and not part of equality.
    """

    outpoint: OutPoint
    at_height: int
    value: int
    script_pubkey: bytes
    confirmations: int = field(default=0, compare=False)

    def serialize(self, sink: Sink) -> None:
        self.outpoint.serialize(sink)
        sink.write_uint32(self.at_height)
        sink.write_uint64(self.value)
        sink.write_var_bytes(self.script_pubkey)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("Utxo", "outpoint"):
            outpoint = OutPoint.deserialize(source)
        with decoding("Utxo", "at_height"):
            at_height = source.next_uint32()
        with decoding("Utxo", "value"):
            value = source.next_uint64()
        with decoding("Utxo", "script_pubkey"):
            script_pubkey = source.next_var_bytes()
        return cls(
            outpoint=outpoint,
            at_height=at_height,
            value=value,
            script_pubkey=script_pubkey,
        )


# ---------------------------------------------------------------------------
# Utxos
# ---------------------------------------------------------------------------


@dataclass
class Utxos(Record):
    """An ordered collection of UTXOs.

    Wire order is storage order. :meth:`sort` ranks the candidates for coin
    selection; it is never applied implicitly.
    """

    utxos: list[Utxo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.utxos)

    def __iter__(self) -> Iterator[Utxo]:
        return iter(self.utxos)

    def __getitem__(self, i: int) -> Utxo:
        return self.utxos[i]

    def append(self, utxo: Utxo) -> None:
        self.utxos.append(utxo)

    def sort(self, *, reverse: bool = False) -> None:
        """Stable in-place sort by ``value * confirmations``."""
        sort_utxos(self.utxos, reverse=reverse)

    @property
    def total_value(self) -> int:
        """Sum of all output values."""
        return sum(u.value for u in self.utxos)

    def serialize(self, sink: Sink) -> None:
        sink.write_uint64(len(self.utxos))
        for utxo in self.utxos:
            utxo.serialize(sink)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("Utxos", "length"):
            n = source.next_uint64()
        utxos: list[Utxo] = []
        # Count is untrusted: grow one decoded element at a time.
        for i in range(n):
            with decoding("Utxos", f"utxos[{i}]"):
                utxos.append(Utxo.deserialize(source))
        return cls(utxos=utxos)
