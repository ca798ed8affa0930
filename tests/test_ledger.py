from dataclasses import FrozenInstanceError

import pytest

from unitcalc.ledger import HistoryEntry, HistoryLedger


def test_new_ledger_is_empty(ledger):
    assert len(ledger) == 0
    assert ledger.entries() == ()

def test_entries_keep_insertion_order(ledger):
    ledger.record("Length", "1.00 m -> ft", "3.28")
    ledger.record("Temperature", "0.00 °C -> °F", "32.00")
    ledger.record("Length", "2.00 m -> ft", "6.56")
    assert [e.result_description for e in ledger] == ["3.28", "32.00", "6.56"]
    assert ledger.entries()[-1].input_description == "2.00 m -> ft"

def test_entries_are_read_only_views(ledger):
    ledger.record("Logarithm", "ln(1.00)", "0.00")
    snapshot = ledger.entries()
    assert isinstance(snapshot, tuple)
    ledger.record("Logarithm", "log2(8.00)", "3.00")
    assert len(snapshot) == 1
    assert len(ledger) == 2

def test_entry_is_immutable():
    entry = HistoryEntry("Currency", "100.00 INR -> USD", "1.20")
    with pytest.raises(FrozenInstanceError):
        entry.result_description = "2.00"

def test_append_rejects_other_types(ledger):
    with pytest.raises(TypeError):
        ledger.append(("Length", "x", "y"))
    assert len(ledger) == 0

def test_entry_str():
    entry = HistoryEntry("Number Base", "FF (hex -> decimal)", "255")
    assert str(entry) == "[Number Base] FF (hex -> decimal)  =  255"

def test_ledgers_do_not_share_state():
    a, b = HistoryLedger(), HistoryLedger()
    a.record("Length", "1.00 m -> ft", "3.28")
    assert len(b) == 0
