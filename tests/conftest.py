"""Shared test fixtures for the btc-xchain test suite."""

from __future__ import annotations

import pytest

from btc_xchain.btc import Args, BtcFromInfo, BtcProof, MultiSignInfo, OutPoint, Utxo, Utxos
from btc_xchain.config.settings import reset_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Isolate every test from BTC_XCHAIN_* variables and the config cache."""
    for var in ("BTC_XCHAIN_REJECT_TRAILING_BYTES", "BTC_XCHAIN_LOG_LEVEL", "BTC_XCHAIN_CONFIG_PATH"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


def _make_utxo(value: int, confirmations: int = 0, index: int = 0) -> Utxo:
    return Utxo(
        outpoint=OutPoint(hash=bytes([index]) * 32, index=index),
        at_height=600_000 + index,
        value=value,
        script_pubkey=b"\x76\xa9\x14" + b"\xab" * 20 + b"\x88\xac",
        confirmations=confirmations,
    )


@pytest.fixture
def sample_records():
    """One populated instance of every record type."""
    return [
        OutPoint(hash=b"\x11" * 32, index=7),
        _make_utxo(50_000, confirmations=3, index=1),
        Utxos(utxos=[_make_utxo(1_000, index=1), _make_utxo(2_000, index=2)]),
        BtcProof(tx=b"\x01\x00\x00\x00" + b"\xee" * 60, proof=b"\x22" * 97, height=650_123, blocks_to_wait=6),
        MultiSignInfo(multi_sign_info={"02aa": [b"\x30\x44", b"\x30\x45"], "03bb": [b"\x30\x46"]}),
        Args(to_chain_id=2, fee=-42, to_contract_address=b"\xc0" * 20, address=b"\xad" * 20),
        BtcFromInfo(from_tx_hash=b"\x33" * 32, from_chain_id=1),
    ]
