"""Deterministic orderings: coin-selection ranking and canonical map keys.

Two unrelated orderings live here:
- utxo_weight / compare_utxos / sort_utxos rank candidates for coin selection
  by ``value * confirmations``, ascending and stable.
- canonical_keys fixes the order MultiSignInfo entries are written in.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from btc_xchain.codec.primitives import encode_string

if TYPE_CHECKING:
    from btc_xchain.btc.utxo import Utxo


# ---------------------------------------------------------------------------
# Coin selection
# ---------------------------------------------------------------------------


def utxo_weight(utxo: Utxo) -> int:
    """Selection weight of a UTXO: ``value * confirmations``.

    Python integers are unbounded, so uint64 * uint32 products never wrap.
    """
    return utxo.value * utxo.confirmations


def compare_utxos(a: Utxo, b: Utxo) -> int:
    """Three-way comparison by weight: -1, 0 or 1."""
    wa = utxo_weight(a)
    wb = utxo_weight(b)
    return (wa > wb) - (wa < wb)


def sort_utxos(utxos: list[Utxo], *, reverse: bool = False) -> None:
    """Sort ``utxos`` in place by weight.

    ``list.sort`` is stable, and stays stable with ``reverse=True``, so
    equal-weight entries keep their input order either way.
    """
    utxos.sort(key=utxo_weight, reverse=reverse)


# ---------------------------------------------------------------------------
# Canonical key order
# ---------------------------------------------------------------------------


def _key_bytes(key: str) -> bytes:
    return encode_string(key)


def canonical_keys(mapping: Mapping[str, object] | Iterable[str]) -> list[str]:
    """Keys in descending byte-wise lexicographic order of their wire bytes.

    Raises:
        ValueError: Two distinct keys share the same wire bytes, e.g. ``"é"``
            and its surrogate-escaped form ``"\\udcc3\\udca9"``.
    """
    by_bytes: dict[bytes, str] = {}
    for key in mapping:
        raw = _key_bytes(key)
        if raw in by_bytes:
            msg = f"keys {by_bytes[raw]!r} and {key!r} encode to the same bytes {raw.hex()}"
            raise ValueError(msg)
        by_bytes[raw] = key
    return [by_bytes[raw] for raw in sorted(by_bytes, reverse=True)]
