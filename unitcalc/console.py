"""
Interactive console session (rich)

- Numbered menu, one operation per iteration
- Numbers are read with FiniteFloatPrompt, which re-asks on malformed,
  NaN or infinite input
- Unit letters are passed through as typed; the engine validates them
- Results and history are shown as tables; errors in red
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import FloatPrompt, InvalidResponse, Prompt
from rich.table import Table

from .dispatcher import Category, Dispatcher, Outcome, format_result
from .engine import BINARY_OPS, CURRENCY_NAMES, EXCHANGE_RATES, Settings
from .ledger import HistoryLedger

logger = logging.getLogger(__name__)

RATES_NOTICE = "Exchange rates are fixed constants, not live market data."


def render_outcome(console: Console, outcome: Outcome, precision: int = 2) -> None:
    if not outcome.ok:
        err = outcome.error
        console.print(f"[bold red]Error ({err.kind.value}):[/bold red] [red]{escape(err.message)}[/red]")
        return
    table = Table(title=outcome.category.label, box=box.ROUNDED)
    table.add_column("Input", style="cyan")
    table.add_column("Result", style="green", justify="right")
    entry = outcome.entry
    if entry is not None:
        table.add_row(escape(entry.input_description), escape(entry.result_description))
    else:
        table.add_row("", escape(format_result(outcome.result.value, precision)))
    console.print(table)

def render_history(console: Console, ledger: HistoryLedger) -> None:
    if not len(ledger):
        console.print("[yellow]No history yet.[/yellow]"); return
    table = Table(title="History", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Input", style="cyan")
    table.add_column("Result", style="green", justify="right")
    for i, e in enumerate(ledger, start=1):
        table.add_row(str(i), e.category, escape(e.input_description), escape(e.result_description))
    console.print(table)

def render_rates(console: Console) -> None:
    table = Table(title="Exchange Rates", box=box.ROUNDED)
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Rate", style="green", justify="right")
    for (f, t), rate in EXCHANGE_RATES.items():
        table.add_row(CURRENCY_NAMES[f], CURRENCY_NAMES[t], f"{rate:g}")
    console.print(table)
    console.print(f"[dim]{RATES_NOTICE} Other pairs are not supported.[/dim]")


class FiniteFloatPrompt(FloatPrompt):
    validate_error_message = "[prompt.invalid]Please enter a finite number"

    def process_response(self, value: str) -> float:
        number = super().process_response(value)
        if not math.isfinite(number):
            raise InvalidResponse(self.validate_error_message)
        return number


class Session:
    """Menu loop around a Dispatcher and its ledger."""

    MENU = "\n".join(f"  [bold]{int(c)}[/bold]. {c.label}" for c in Category)

    def __init__(self, settings: Optional[Settings] = None, console: Optional[Console] = None,
                 dispatcher: Optional[Dispatcher] = None) -> None:
        self.settings = settings or Settings(); self.settings.validate()
        self.console = console or Console(no_color=not self.settings.color)
        self.dispatcher = dispatcher or Dispatcher(HistoryLedger(), self.settings)
        self._readers: Dict[Category, Callable[[], Dict[str, object]]] = {
            Category.CALCULATOR: self._read_calculator,
            Category.TEMPERATURE: self._read_temperature,
            Category.NUMBER_BASE: self._read_number_base,
            Category.LOGARITHM: self._read_logarithm,
            Category.CURRENCY: self._read_currency,
            Category.LENGTH: self._read_length,
        }

    @property
    def ledger(self) -> HistoryLedger:
        return self.dispatcher.ledger

    def run(self) -> int:
        while True:
            self.show_menu()
            try:
                choice = Prompt.ask("[bold cyan]Choose an option[/bold cyan]", console=self.console)
                if not self.handle(choice): break
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
        self.console.print("[green]Goodbye![/green]")
        return 0

    def show_menu(self) -> None:
        self.console.print(Panel(self.MENU, title="Unit Converter & Calculator", border_style="green"))

    def handle(self, choice: str) -> bool:
        """Run one menu choice; False means the session should end."""
        try: cat = Category(int(choice.strip()))
        except ValueError:
            self.console.print(f"[red]Invalid choice '{escape(choice.strip())}'. Enter a number from 1 to 8.[/red]")
            return True
        if cat is Category.QUIT: return False
        if cat is Category.HISTORY:
            render_history(self.console, self.ledger); return True
        try:
            inputs = self._readers[cat]()
            op = self.dispatcher.build(cat, **inputs)
            outcome = self.dispatcher.run(cat, op)
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as exc:
            logger.exception("unexpected failure in %s", cat.label)
            self.console.print(f"[red]Error: {escape(str(exc))}[/red]")
            return True
        render_outcome(self.console, outcome, self.settings.precision)
        return True

    # ---- Prompts

    def _number(self, label: str) -> float:
        return FiniteFloatPrompt.ask(label, console=self.console)

    def _letter(self, label: str) -> str:
        return Prompt.ask(label, console=self.console)

    def _read_calculator(self) -> Dict[str, object]:
        num1 = self._number("First number")
        op = self._letter("Operation (+, -, *, /, ^, S=sin, C=cos, T=tan; angles in degrees)")
        num2 = self._number("Second number") if op.strip() in BINARY_OPS else None
        return {"num1": num1, "operation": op, "num2": num2}

    def _read_temperature(self) -> Dict[str, object]:
        return {"value": self._number("Temperature"),
                "from_unit": self._letter("From (C/F)"), "to_unit": self._letter("To (C/F)")}

    def _read_number_base(self) -> Dict[str, object]:
        bases = "B=binary, D=decimal, O=octal, H=hex"
        return {"token": self._letter("Number"),
                "from_base": self._letter(f"From base ({bases})"),
                "to_base": self._letter(f"To base ({bases})")}

    def _read_logarithm(self) -> Dict[str, object]:
        return {"value": self._number("Value"), "mode": self._letter("Mode (L=log10, N=ln, B=log2)")}

    def _read_currency(self) -> Dict[str, object]:
        self.console.print(f"[dim]{RATES_NOTICE} Supported: INR<->USD, USD<->EUR, USD<->GBP.[/dim]")
        codes = "I=INR, U=USD, E=EUR, G=GBP"
        return {"amount": self._number("Amount"),
                "from_currency": self._letter(f"From ({codes})"),
                "to_currency": self._letter(f"To ({codes})")}

    def _read_length(self) -> Dict[str, object]:
        return {"value": self._number("Length"),
                "from_unit": self._letter("From (M=meters, F=feet)"),
                "to_unit": self._letter("To (M=meters, F=feet)")}
