"""Ledger engine: balances, query helpers and the service that feeds them."""

from splitledger.utils.errors import InvalidRecord, LedgerError, RecordNotFound
from splitledger.utils.money import EPSILON, round_currency
from .balance_service import (
    BalanceService,
    balance_of,
    compute_balances,
    total_lent_by,
    total_owed_by,
)
from .ledger_service import LedgerService, LedgerSnapshot

__all__ = [
    "EPSILON",
    "round_currency",
    "LedgerError",
    "InvalidRecord",
    "RecordNotFound",
    "BalanceService",
    "compute_balances",
    "balance_of",
    "total_owed_by",
    "total_lent_by",
    "LedgerService",
    "LedgerSnapshot",
]
