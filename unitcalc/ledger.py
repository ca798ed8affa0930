"""Session history of completed operations (in memory, append-only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class HistoryEntry:
    category: str
    input_description: str
    result_description: str

    def __str__(self) -> str:
        return f"[{self.category}] {self.input_description}  =  {self.result_description}"


class HistoryLedger:
    """Ordered record of successful operations; entries are never removed."""

    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = []

    def append(self, entry: HistoryEntry) -> HistoryEntry:
        if not isinstance(entry, HistoryEntry):
            raise TypeError("ledger only accepts HistoryEntry records")
        self._entries.append(entry)
        return entry

    def record(self, category: str, input_description: str, result_description: str) -> HistoryEntry:
        return self.append(HistoryEntry(category, input_description, result_description))

    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int: return len(self._entries)
    def __iter__(self) -> Iterator[HistoryEntry]: return iter(tuple(self._entries))
