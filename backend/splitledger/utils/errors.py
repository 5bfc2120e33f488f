"""Ledger error taxonomy."""


class LedgerError(Exception):
    """Base class for ledger failures."""


class InvalidRecord(LedgerError, ValueError):
    """An expense or payment that cannot enter the ledger.

    Raised for a non-positive amount or an empty split, before any
    division by the split size can happen.
    """


class RecordNotFound(LedgerError, KeyError):
    """A persistence lookup for an id that does not exist."""

    def __str__(self):
        return str(self.args[0]) if self.args else "Record not found"
