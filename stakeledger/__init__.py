"""Coin encoding, table row types and an HTTP actions worker for staking chain data."""

__version__ = "0.1.0"