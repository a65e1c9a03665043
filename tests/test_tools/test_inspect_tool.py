"""Tests for the record inspector CLI: tools/inspect_tool.py."""

from __future__ import annotations

import json
import struct

import pytest

from btc_xchain.btc import Args, MultiSignInfo
from btc_xchain.tools.inspect_tool import main, record_to_dict


class TestRecordToDict:
    def test_bytes_as_hex(self) -> None:
        args = Args(to_chain_id=2, fee=-42, to_contract_address=b"\xc0\xde", address=b"\xad")
        assert record_to_dict(args) == {
            "to_chain_id": 2,
            "fee": -42,
            "to_contract_address": "c0de",
            "address": "ad",
        }

    def test_nested_lists(self) -> None:
        info = MultiSignInfo(multi_sign_info={"k": [b"\x01", b"\x02"]})
        assert record_to_dict(info) == {"multi_sign_info": {"k": ["01", "02"]}}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestMain:
    def test_decode(self, capsys) -> None:
        hex_str = Args(to_chain_id=2, fee=-42, to_contract_address=b"\xc0", address=b"\xad").to_hex()
        main(["decode", "Args", hex_str])
        out = json.loads(capsys.readouterr().out)
        assert out["fee"] == -42
        assert out["address"] == "ad"

    def test_decode_error_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["decode", "Args", "00"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "field-decode" in out
        assert "Args deserialize to_chain_id error" in out

    def test_bad_hex_exits(self, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["decode", "Args", "xyz"])
        assert "malformed-data" in capsys.readouterr().out

    def test_reencode_canonical(self, capsys) -> None:
        hex_str = MultiSignInfo(multi_sign_info={"a": [], "b": []}).to_hex()
        main(["reencode", "MultiSignInfo", hex_str])
        out = capsys.readouterr().out.splitlines()
        assert out == [hex_str, "canonical: yes"]

    def test_reencode_ignores_hex_whitespace_and_case(self, capsys) -> None:
        hex_str = MultiSignInfo(multi_sign_info={"a": [], "b": []}).to_hex().upper()
        spaced = f"{hex_str[:4]} {hex_str[4:]}"
        main(["reencode", "MultiSignInfo", spaced])
        out = capsys.readouterr().out.splitlines()
        assert out == [hex_str.lower(), "canonical: yes"]

    def test_reencode_non_canonical(self, capsys) -> None:
        data = struct.pack("<Q", 2)
        for key in (b"a", b"b"):
            data += b"\x01" + key + struct.pack("<Q", 0)
        main(["reencode", "MultiSignInfo", data.hex()])
        out = capsys.readouterr().out.splitlines()
        assert out[0] != data.hex()
        assert out[1].startswith("canonical: no")

    def test_records(self, capsys) -> None:
        main(["records"])
        names = capsys.readouterr().out.split()
        assert "Utxos" in names
        assert len(names) == 7

    def test_unknown_record(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["decode", "Nope", "00"])
        assert exc_info.value.code == 1
        assert "Unknown record: Nope" in capsys.readouterr().out

    def test_unknown_command(self, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["frobnicate"])
        assert "Unknown command" in capsys.readouterr().out

    def test_missing_args(self, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["decode", "Args"])
        assert "Usage" in capsys.readouterr().out

    def test_no_args_prints_doc(self, capsys) -> None:
        with pytest.raises(SystemExit):
            main([])
        assert "inspect_tool" in capsys.readouterr().out
