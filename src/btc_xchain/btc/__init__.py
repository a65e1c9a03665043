"""Bridge record types and coin-selection ordering."""

from btc_xchain.btc.multisign import MultiSignInfo
from btc_xchain.btc.ordering import canonical_keys, compare_utxos, sort_utxos, utxo_weight
from btc_xchain.btc.proof import BtcProof
from btc_xchain.btc.transfer import Args, BtcFromInfo
from btc_xchain.btc.utxo import OutPoint, Utxo, Utxos

RECORD_TYPES = {
    cls.__name__: cls
    for cls in (OutPoint, Utxo, Utxos, BtcProof, MultiSignInfo, Args, BtcFromInfo)
}

__all__ = [
    "RECORD_TYPES",
    "Args",
    "BtcFromInfo",
    "BtcProof",
    "MultiSignInfo",
    "OutPoint",
    "Utxo",
    "Utxos",
    "canonical_keys",
    "compare_utxos",
    "sort_utxos",
    "utxo_weight",
]
