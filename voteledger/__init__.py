"""A hash-linked ledger of citizen registrations and votes, with family records, record views and a menu console."""

__version__ = "0.1.0"