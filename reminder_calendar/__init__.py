"""Reminder calendar: holiday and reminder reconciliation for a browsable calendar."""

__version__ = "0.1.0"
