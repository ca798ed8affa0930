import builtins
import io

import pytest
from rich.console import Console

from unitcalc.dispatcher import Dispatcher
from unitcalc.engine import Settings
from unitcalc.ledger import HistoryLedger


@pytest.fixture
def ledger():
    return HistoryLedger()

@pytest.fixture
def dispatcher(ledger):
    return Dispatcher(ledger, Settings())

@pytest.fixture
def console():
    # Not a terminal, so no ANSI codes end up in the captured text
    return Console(file=io.StringIO(), width=120, no_color=True)

@pytest.fixture
def scripted_input(monkeypatch):
    """Feed lines to input(); EOFError once they run out."""
    def _script(*lines):
        remaining = list(lines)
        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)
        monkeypatch.setattr(builtins, "input", fake_input)
        return remaining
    return _script
