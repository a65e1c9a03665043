"""BtcProof: a Bitcoin transaction with its inclusion proof."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from btc_xchain.codec.primitives import Sink, Source
from btc_xchain.codec.record import Record, decoding


@dataclass
class BtcProof(Record):
    """Evidence that ``tx`` was mined at ``height``.

    The proof is opaque here; verifying it against headers is the relayer's
    job.

    Attributes:
        tx: Raw transaction bytes.
        proof: Inclusion proof, e.g. a serialized Merkle path.
        height: Block height of inclusion (uint32).
        blocks_to_wait: Confirmations required before acting on it (uint64).
    """

    tx: bytes
    proof: bytes
    height: int
    blocks_to_wait: int

    def serialize(self, sink: Sink) -> None:
        sink.write_var_bytes(self.tx)
        sink.write_var_bytes(self.proof)
        sink.write_uint32(self.height)
        sink.write_uint64(self.blocks_to_wait)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("BtcProof", "tx"):
            tx = source.next_var_bytes()
        with decoding("BtcProof", "proof"):
            proof = source.next_var_bytes()
        with decoding("BtcProof", "height"):
            height = source.next_uint32()
        with decoding("BtcProof", "blocks_to_wait"):
            blocks_to_wait = source.next_uint64()
        return cls(tx=tx, proof=proof, height=height, blocks_to_wait=blocks_to_wait)
