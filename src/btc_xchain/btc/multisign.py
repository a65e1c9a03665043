"""MultiSignInfo: signature shares collected per participant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from btc_xchain.btc.ordering import canonical_keys
from btc_xchain.codec.primitives import Sink, Source
from btc_xchain.codec.record import Record, decoding


@dataclass
class MultiSignInfo(Record):
    """Map of participant key (e.g. a hex public key) to its signatures.

    Serialization writes entries in descending byte order of the key so that
    every party produces the same bytes for the same mapping. Each key's
    list keeps the order it was given in.
    """

    multi_sign_info: dict[str, list[bytes]] = field(default_factory=dict)

    def add_signature(self, key: str, sig: bytes) -> None:
        """Append ``sig`` to ``key``'s list, creating it if needed."""
        self.multi_sign_info.setdefault(key, []).append(sig)

    def serialize(self, sink: Sink) -> None:
        sink.write_uint64(len(self.multi_sign_info))
        for key in canonical_keys(self.multi_sign_info):
            sigs = self.multi_sign_info[key]
            sink.write_string(key)
            sink.write_uint64(len(sigs))
            for sig in sigs:
                sink.write_var_bytes(sig)

    @classmethod
    def deserialize(cls, source: Source) -> Self:
        with decoding("MultiSignInfo", "length"):
            n = source.next_uint64()
        info: dict[str, list[bytes]] = {}
        for _ in range(n):
            with decoding("MultiSignInfo", "public key"):
                key = source.next_string()
            with decoding("MultiSignInfo", f"{key!r} length"):
                m = source.next_uint64()
            sigs: list[bytes] = []
            for j in range(m):
                with decoding("MultiSignInfo", f"{key!r}[{j}]"):
                    sigs.append(source.next_var_bytes())
            # Later duplicates replace earlier entries.
            info[key] = sigs
        return cls(multi_sign_info=info)
