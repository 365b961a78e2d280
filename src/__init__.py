"""Clinic cash ledger: daily cash balance reconciliation."""
