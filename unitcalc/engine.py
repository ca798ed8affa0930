"""
Conversion & calculation engine

- Operations: Temperature, NumberBase, Logarithm, Currency, Length, Calculator
- Each operation is a frozen dataclass; compute() runs it and returns a Result
- Fixed unit set, fixed exchange rates (not live data)

Number base notes
- B/O/H tokens accept an optional sign and matching 0b/0o/0x prefix
- D accepts ASCII decimal literals (digits, '.', exponent); the fractional
  part is dropped exactly, with no float rounding
- Negative values keep a leading '-' on the magnitude (e.g. -FF -> -255)
- Range is signed 64-bit
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional, Tuple, TypeVar, Union

# ============================== Errors ======================================

class ErrorKind(enum.Enum):
    INVALID_UNIT = "InvalidUnit"
    INVALID_FORMAT = "InvalidFormat"
    OUT_OF_RANGE = "OutOfRange"
    DOMAIN_ERROR = "DomainError"
    DIVISION_BY_ZERO = "DivisionByZero"
    UNDEFINED_RESULT = "UndefinedResult"
    UNSUPPORTED_CONVERSION = "UnsupportedConversion"

class CalculationError(Exception):
    kind: ErrorKind = ErrorKind.INVALID_FORMAT

class InvalidUnitError(CalculationError): kind = ErrorKind.INVALID_UNIT
class InvalidFormatError(CalculationError): kind = ErrorKind.INVALID_FORMAT
class OutOfRangeError(CalculationError): kind = ErrorKind.OUT_OF_RANGE
class DomainError(CalculationError): kind = ErrorKind.DOMAIN_ERROR
class DivisionByZeroError(CalculationError): kind = ErrorKind.DIVISION_BY_ZERO
class UndefinedResultError(CalculationError): kind = ErrorKind.UNDEFINED_RESULT
class UnsupportedConversionError(CalculationError): kind = ErrorKind.UNSUPPORTED_CONVERSION

# ============================== Settings ====================================

@dataclass
class Settings:
    precision: int = 2        # decimal places for numeric results
    color: bool = True
    verbose: bool = False
    def validate(self) -> None:
        if not (0 <= int(self.precision) <= 10):
            raise ValueError("precision must be 0..10")

# ============================== Constants ===================================

INR_TO_USD = 0.012
USD_TO_INR = 83.33
USD_TO_EUR = 0.92
USD_TO_GBP = 0.79
EUR_TO_USD = 1.09
GBP_TO_USD = 1.27

CURRENCY_NAMES: Mapping[str, str] = MappingProxyType({"I": "INR", "U": "USD", "E": "EUR", "G": "GBP"})

EXCHANGE_RATES: Mapping[Tuple[str, str], float] = MappingProxyType({
    ("I", "U"): INR_TO_USD, ("U", "I"): USD_TO_INR,
    ("U", "E"): USD_TO_EUR, ("E", "U"): EUR_TO_USD,
    ("U", "G"): USD_TO_GBP, ("G", "U"): GBP_TO_USD,
})

METERS_TO_FEET = 3.28084
FEET_TO_METERS = 0.3048

LENGTH_FACTORS: Mapping[Tuple[str, str], float] = MappingProxyType({
    ("M", "F"): METERS_TO_FEET, ("F", "M"): FEET_TO_METERS,
})
LENGTH_NAMES: Mapping[str, str] = MappingProxyType({"M": "m", "F": "ft"})

TEMPERATURE_UNITS = frozenset("CF")

# letter -> (radix, display name)
BASES: Mapping[str, Tuple[int, str]] = MappingProxyType({
    "B": (2, "binary"), "D": (10, "decimal"), "O": (8, "octal"), "H": (16, "hex"),
})
_PREFIXES: Dict[int, str] = {2: "0b", 8: "0o", 16: "0x"}
DIGITS = "0123456789ABCDEF"
INT_MAX = 2 ** 63 - 1
INT_MIN = -(2 ** 63)

LOG_MODES: Mapping[str, str] = MappingProxyType({"L": "log10", "N": "ln", "B": "log2"})

BINARY_OPS = frozenset("+-*/^")
TRIG_OPS: Mapping[str, str] = MappingProxyType({"S": "sin", "C": "cos", "T": "tan"})

# ============================== Result ======================================

T = TypeVar("T")

@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    def __str__(self) -> str: return f"{self.kind.value}: {self.message}"

@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Failure] = None

    @property
    def ok(self) -> bool: return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]": return cls(value=value)

    @classmethod
    def failure(cls, exc: CalculationError) -> "Result[T]":
        return cls(error=Failure(exc.kind, str(exc)))

# ============================== Helpers =====================================

Number = Union[int, float]

def _unit(letter: str) -> str:
    return (letter or "").strip().upper()

def _finite(x: float) -> float:
    if math.isnan(x): raise DomainError("Result is not a number.")
    if math.isinf(x): raise OutOfRangeError("Result is too large to represent.")
    return x

_DECIMAL_TOKEN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

def _truncate_decimal(s: str) -> int:
    if s.lstrip("+-").lower() in ("inf", "infinity"): raise OutOfRangeError(f"'{s}' is out of range.")
    if not _DECIMAL_TOKEN.fullmatch(s): raise InvalidFormatError(f"'{s}' is not a decimal number.")
    d = Decimal(s)
    # checked before int() so '1e999999' never builds a huge integer
    if not (INT_MIN - 1 < d < INT_MAX + 1): raise OutOfRangeError(f"'{s}' is out of range.")
    return int(d)

def parse_integer(token: str, radix: int) -> int:
    s = (token or "").strip()
    if not s: raise InvalidFormatError("Empty number.")
    if radix == 10:
        n = _truncate_decimal(s)
    else:
        sign, body = _split_sign(s, radix)
        if not body or any(ch not in DIGITS[:radix] for ch in body.upper()):
            raise InvalidFormatError(f"'{s}' is not a valid base-{radix} number.")
        n = int(sign + body, radix)
    if not (INT_MIN <= n <= INT_MAX): raise OutOfRangeError(f"'{s}' is out of range.")
    return n

def _split_sign(s: str, radix: int) -> Tuple[str, str]:
    sign, body = "", s
    if body[:1] in ("+", "-"): sign, body = body[0], body[1:]
    if radix in _PREFIXES and body.lower().startswith(_PREFIXES[radix]): body = body[2:]
    return sign, body

def canonical_token(token: str, radix: int) -> str:
    """Token as shown in history: no '+', no radix prefix, uppercase."""
    s = (token or "").strip()
    if not s: return s
    sign, body = _split_sign(s, radix)
    return ("-" if sign == "-" else "") + body.upper()

def format_integer(n: int, radix: int) -> str:
    if radix == 10: return str(n)
    if n == 0: return "0"
    sign = "-" if n < 0 else ""; n = abs(n); r = []
    while n: n, m = divmod(n, radix); r.append(DIGITS[m])
    return sign + "".join(reversed(r))

def format_number(x: Number, precision: int = 2) -> str:
    text = f"{float(x):.{int(precision)}f}"
    if text.startswith("-") and float(text) == 0: text = text[1:]   # no "-0.00"
    return text

# ============================== Operations ==================================

class _Computable:
    def compute(self) -> "Result[Union[float, str]]":
        return compute(self)  # type: ignore[arg-type]

@dataclass(frozen=True)
class Temperature(_Computable):
    value: float
    from_unit: str
    to_unit: str

@dataclass(frozen=True)
class NumberBase(_Computable):
    token: str
    from_base: str
    to_base: str

@dataclass(frozen=True)
class Logarithm(_Computable):
    value: float
    mode: str

@dataclass(frozen=True)
class Currency(_Computable):
    amount: float
    from_currency: str
    to_currency: str

@dataclass(frozen=True)
class Length(_Computable):
    value: float
    from_unit: str
    to_unit: str

@dataclass(frozen=True)
class Calculator(_Computable):
    num1: float
    operation: str
    num2: Optional[float] = None

Operation = Union[Temperature, NumberBase, Logarithm, Currency, Length, Calculator]

def _temperature(op: Temperature) -> float:
    f, t = _unit(op.from_unit), _unit(op.to_unit)
    for u in (f, t):
        if u not in TEMPERATURE_UNITS: raise InvalidUnitError(f"Unknown temperature unit '{u}' (use C or F).")
    if f == t: return op.value
    return op.value * 9 / 5 + 32 if f == "C" else (op.value - 32) * 5 / 9

def _number_base(op: NumberBase) -> str:
    f, t = _unit(op.from_base), _unit(op.to_base)
    for u in (f, t):
        if u not in BASES: raise InvalidUnitError(f"Unknown base '{u}' (use B, D, O or H).")
    return format_integer(parse_integer(op.token, BASES[f][0]), BASES[t][0])

def _logarithm(op: Logarithm) -> float:
    mode = _unit(op.mode)
    if mode not in LOG_MODES: raise InvalidUnitError(f"Unknown logarithm mode '{mode}' (use L, N or B).")
    if op.value <= 0: raise DomainError("log requires x > 0.")
    if mode == "L": return math.log10(op.value)
    if mode == "B": return math.log2(op.value)
    return math.log(op.value)

def _currency(op: Currency) -> float:
    f, t = _unit(op.from_currency), _unit(op.to_currency)
    if f in CURRENCY_NAMES and f == t: return op.amount
    rate = EXCHANGE_RATES.get((f, t))
    if rate is None:
        raise UnsupportedConversionError(f"No exchange rate from '{f}' to '{t}'.")
    return op.amount * rate

def _length(op: Length) -> float:
    f, t = _unit(op.from_unit), _unit(op.to_unit)
    for u in (f, t):
        if u not in LENGTH_NAMES: raise InvalidUnitError(f"Unknown length unit '{u}' (use M or F).")
    if f == t: return op.value
    return op.value * LENGTH_FACTORS[(f, t)]

def _trig(sym: str, x: float) -> float:
    if not math.isfinite(x): raise DomainError(f"{TRIG_OPS[sym]} requires a finite angle.")
    # exact in degrees; math.cos(radians(90)) is 6e-17, not 0
    if sym == "T" and math.fmod(x, 180.0) in (90.0, -90.0):
        raise UndefinedResultError(f"tan undefined for {x:g}° (cos = 0).")
    r = math.radians(x)
    if sym == "S": return math.sin(r)
    if sym == "C": return math.cos(r)
    return math.tan(r)

def _calculator(op: Calculator) -> float:
    sym = _unit(op.operation)
    a = op.num1
    if sym in TRIG_OPS: return _trig(sym, a)
    if sym not in BINARY_OPS: raise InvalidUnitError(f"Unknown operation '{op.operation}'.")
    if op.num2 is None: raise InvalidFormatError(f"Operation '{sym}' needs a second number.")
    b = op.num2
    if sym == "+": return a + b
    if sym == "-": return a - b
    if sym == "*": return a * b
    if sym == "/":
        if b == 0: raise DivisionByZeroError("Division by zero.")
        return a / b
    if a == 0 and b < 0: raise DomainError("0 cannot be raised to a negative power.")
    try: return math.pow(a, b)
    except OverflowError: raise OutOfRangeError("Result is too large to represent.") from None
    except ValueError: raise DomainError(f"{a:g} ^ {b:g} has no real result.") from None

def evaluate(op: Operation) -> Union[float, str]:
    """Run *op*, raising a CalculationError subclass on failure."""
    if isinstance(op, NumberBase): return _number_base(op)
    if isinstance(op, Temperature): result = _temperature(op)
    elif isinstance(op, Logarithm): result = _logarithm(op)
    elif isinstance(op, Currency):  result = _currency(op)
    elif isinstance(op, Length):    result = _length(op)
    elif isinstance(op, Calculator): result = _calculator(op)
    else: raise TypeError(f"Unsupported operation: {type(op).__name__}")
    return _finite(float(result))

def compute(op: Operation) -> Result[Union[float, str]]:
    try:
        return Result.success(evaluate(op))
    except CalculationError as exc:
        return Result.failure(exc)
