"""GoldenDoge wallet client helpers: amounts, walletd RPC types, proofs, keys, logging, updates and sync."""

__version__ = "0.1.0"