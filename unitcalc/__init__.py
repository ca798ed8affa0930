"""Unit converter & calculator for the terminal."""

__version__ = "1.0.0"

from .engine import (Calculator, CalculationError, Currency, ErrorKind, Length,  # noqa: E402
                     Logarithm, NumberBase, Operation, Result, Settings, Temperature,
                     compute)
from .ledger import HistoryEntry, HistoryLedger  # noqa: E402
from .dispatcher import Category, Dispatcher, Outcome  # noqa: E402

__all__ = [
    "Calculator", "CalculationError", "Currency", "ErrorKind", "Length", "Logarithm",
    "NumberBase", "Operation", "Result", "Settings", "Temperature", "compute",
    "HistoryEntry", "HistoryLedger", "Category", "Dispatcher", "Outcome",
]
