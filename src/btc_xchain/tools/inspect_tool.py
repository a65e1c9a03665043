#!/usr/bin/env python3
"""Bridge record inspector: decode and re-encode hex-encoded records.

    # Show the fields of an encoded record
    python -m btc_xchain.tools.inspect_tool decode <record> <hex>

    # Decode, re-encode and report whether the input was canonical
    python -m btc_xchain.tools.inspect_tool reencode <record> <hex>

    # List record names
    python -m btc_xchain.tools.inspect_tool records

Records: OutPoint, Utxo, Utxos, BtcProof, MultiSignInfo, Args, BtcFromInfo
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from typing import Any

from btc_xchain.btc import RECORD_TYPES
from btc_xchain.codec.record import Record
from btc_xchain.config.settings import get_config
from btc_xchain.errors.codec_errors import CodecError

logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    """Convert decoded field values to JSON-friendly ones (bytes as hex)."""
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def record_to_dict(record: Record) -> dict[str, Any]:
    """Field dict of a decoded record, with bytes rendered as hex."""
    return _jsonable(dataclasses.asdict(record))


def _decode(name: str, hex_str: str) -> Record:
    logger.debug("Decoding %d hex chars as %s", len(hex_str), name)
    return RECORD_TYPES[name].from_hex(hex_str)


def _cmd_decode(name: str, hex_str: str) -> None:
    """Print the fields of a record as JSON."""
    record = _decode(name, hex_str)
    print(json.dumps(record_to_dict(record), indent=2))


def _cmd_reencode(name: str, hex_str: str) -> None:
    """Decode then re-encode, reporting whether the input was canonical."""
    record = _decode(name, hex_str)
    canonical = record.to_hex()
    print(canonical)
    if canonical == bytes.fromhex(hex_str).hex():
        print("canonical: yes")
    else:
        print("canonical: no (input differs from canonical encoding)")


def _cmd_records() -> None:
    for name in RECORD_TYPES:
        print(name)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_config().log_level.value)

    if not args:
        print(__doc__)
        sys.exit(1)

    cmd = args[0].lower()

    try:
        if cmd == "records":
            _cmd_records()
        elif cmd in ("decode", "reencode"):
            if len(args) < 3:
                print(f"Usage: inspect_tool {cmd} <record> <hex>")
                sys.exit(1)
            if args[1] not in RECORD_TYPES:
                print(f"Unknown record: {args[1]}")
                sys.exit(1)
            handler = _cmd_decode if cmd == "decode" else _cmd_reencode
            handler(args[1], args[2])
        else:
            print(f"Unknown command: {cmd}")
            print(__doc__)
            sys.exit(1)
    except CodecError as exc:
        print(f"error [{exc.code}]: {exc.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
