# src/dominionsim/utils/logging.py
from typing import Any, Dict, List


class EventLog:
    """Append-only list of {"a": <event>, ...} records."""

    def __init__(self) -> None:
        self.records: List[Dict[str, Any]] = []

    def emit(self, rec: Dict[str, Any]) -> None:
        self.records.append(rec)

    def of(self, kind: str) -> List[Dict[str, Any]]:
        return [r for r in self.records if r.get("a") == kind]

    def __len__(self) -> int:
        return len(self.records)
