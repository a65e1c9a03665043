"""Canonical binary codec for Bitcoin cross-chain bridge records."""

__version__ = "0.1.0"
