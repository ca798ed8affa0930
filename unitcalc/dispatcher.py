"""
Menu category -> operation dispatch

Builds the operation for a category, runs it, and records successful runs in
the session ledger. Failures come back as an Outcome with an error and leave
the ledger untouched.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, Union

from .engine import (BASES, CURRENCY_NAMES, LENGTH_NAMES, LOG_MODES, TRIG_OPS,
                     Calculator, Currency, Failure, Length, Logarithm, NumberBase,
                     Operation, Result, Settings, Temperature, canonical_token,
                     format_number)
from .ledger import HistoryEntry, HistoryLedger

logger = logging.getLogger(__name__)


class Category(enum.IntEnum):
    CALCULATOR = 1
    TEMPERATURE = 2
    NUMBER_BASE = 3
    LOGARITHM = 4
    CURRENCY = 5
    LENGTH = 6
    HISTORY = 7
    QUIT = 8

    @property
    def label(self) -> str:
        return _LABELS[self]

_LABELS: Dict[Category, str] = {
    Category.CALCULATOR: "Calculator", Category.TEMPERATURE: "Temperature",
    Category.NUMBER_BASE: "Number Base", Category.LOGARITHM: "Logarithm",
    Category.CURRENCY: "Currency", Category.LENGTH: "Length",
    Category.HISTORY: "View History", Category.QUIT: "Quit",
}

OPERATION_TYPES: Dict[Category, Type[Any]] = {
    Category.CALCULATOR: Calculator, Category.TEMPERATURE: Temperature,
    Category.NUMBER_BASE: NumberBase, Category.LOGARITHM: Logarithm,
    Category.CURRENCY: Currency, Category.LENGTH: Length,
}


@dataclass(frozen=True)
class Outcome:
    category: Category
    operation: Operation
    result: Result[Union[float, str]]
    entry: Optional[HistoryEntry] = None

    @property
    def ok(self) -> bool: return self.result.ok

    @property
    def error(self) -> Optional[Failure]: return self.result.error


def _u(letter: str) -> str:
    return (letter or "").strip().upper()

def describe(op: Operation, precision: int = 2) -> str:
    """Canonical one-line description of an operation's inputs."""
    def fmt(x: float) -> str: return format_number(x, precision)
    if isinstance(op, Calculator):
        sym = _u(op.operation)
        if sym in TRIG_OPS: return f"{TRIG_OPS[sym]}({fmt(op.num1)}°)"
        rhs = "?" if op.num2 is None else fmt(op.num2)
        return f"{fmt(op.num1)} {op.operation.strip()} {rhs}"
    if isinstance(op, Temperature):
        return f"{fmt(op.value)} °{_u(op.from_unit)} -> °{_u(op.to_unit)}"
    if isinstance(op, NumberBase):
        f, t = _u(op.from_base), _u(op.to_base)
        token = canonical_token(op.token, BASES[f][0] if f in BASES else 10)
        return f"{token} ({BASES[f][1] if f in BASES else f} -> {BASES[t][1] if t in BASES else t})"
    if isinstance(op, Logarithm):
        return f"{LOG_MODES.get(_u(op.mode), 'log?')}({fmt(op.value)})"
    if isinstance(op, Currency):
        f, t = _u(op.from_currency), _u(op.to_currency)
        return f"{fmt(op.amount)} {CURRENCY_NAMES.get(f, f)} -> {CURRENCY_NAMES.get(t, t)}"
    if isinstance(op, Length):
        f, t = _u(op.from_unit), _u(op.to_unit)
        return f"{fmt(op.value)} {LENGTH_NAMES.get(f, f)} -> {LENGTH_NAMES.get(t, t)}"
    raise TypeError(f"Unsupported operation: {type(op).__name__}")

def format_result(value: Union[float, str], precision: int = 2) -> str:
    return value if isinstance(value, str) else format_number(value, precision)


class Dispatcher:
    def __init__(self, ledger: Optional[HistoryLedger] = None, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings(); self.settings.validate()
        self.ledger = ledger if ledger is not None else HistoryLedger()

    def build(self, category: Union[Category, int], **inputs: Any) -> Operation:
        cat = self._category(category)
        return OPERATION_TYPES[cat](**inputs)

    def dispatch(self, category: Union[Category, int], **inputs: Any) -> Outcome:
        cat = self._category(category)
        return self.run(cat, OPERATION_TYPES[cat](**inputs))

    def run(self, category: Union[Category, int], op: Operation) -> Outcome:
        cat = self._category(category)
        logger.debug("dispatch %s: %r", cat.label, op)
        result = op.compute()
        if not result.ok:
            logger.info("%s failed: %s", cat.label, result.error)
            return Outcome(cat, op, result)
        p = self.settings.precision
        entry = self.ledger.record(cat.label, describe(op, p), format_result(result.value, p))
        logger.debug("recorded history entry #%d", len(self.ledger))
        return Outcome(cat, op, result, entry)

    @staticmethod
    def _category(category: Union[Category, int]) -> Category:
        try: cat = Category(int(category))
        except ValueError: raise ValueError(f"Unknown category: {category!r}") from None
        if cat not in OPERATION_TYPES:
            raise ValueError(f"Category {int(cat)} ({cat.label}) is not an operation")
        return cat
