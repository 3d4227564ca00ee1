"""Ledger P&L dashboard package."""
