"""Cross-chain transfer records: Args and BtcFromInfo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from btc_xchain.codec.primitives import Sink, Source
from btc_xchain.codec.record import Record, decoding


@dataclass
class Args(Record):
    """Instruction for moving funds to another chain.

    Attributes:
        to_chain_id: Destination chain identifier (uint64).
        fee: Signed fee (int64); negative values round-trip unchanged.
        to_contract_address: Destination contract address bytes.
        address: Recipient address bytes.
    """

    to_chain_id: int
    fee: int
    to_contract_address: bytes
    address: bytes

    def serialize(self, sink: Sink) -> None:
        sink.write_uint64(self.to_chain_id)
        sink.write_int64(self.fee)
        sink.write_var_bytes(self.to_contract_address)
        sink.write_var_bytes(self.address)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("Args", "to_chain_id"):
            to_chain_id = source.next_uint64()
        with decoding("Args", "fee"):
            fee = source.next_int64()
        with decoding("Args", "to_contract_address"):
            to_contract_address = source.next_var_bytes()
        with decoding("Args", "address"):
            address = source.next_var_bytes()
        return cls(
            to_chain_id=to_chain_id,
            fee=fee,
            to_contract_address=to_contract_address,
            address=address,
        )


@dataclass
class BtcFromInfo(Record):
    """Where an inbound transaction came from."""

    from_tx_hash: bytes
    from_chain_id: int

    def serialize(self, sink: Sink) -> None:
        sink.write_var_bytes(self.from_tx_hash)
        sink.write_uint64(self.from_chain_id)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("BtcFromInfo", "from_tx_hash"):
            from_tx_hash = source.next_var_bytes()
        with decoding("BtcFromInfo", "from_chain_id"):
            from_chain_id = source.next_uint64()
        return cls(from_tx_hash=from_tx_hash, from_chain_id=from_chain_id)
