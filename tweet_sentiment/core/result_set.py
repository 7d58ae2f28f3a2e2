"""Thread-safe accumulation of scored tweets for one analysis run."""

import threading
from typing import Dict, Iterable, List

from ..models.results import ScoredRecord


class ResultSet:
    """
    Mapping of result key -> ScoredRecord shared by all scoring workers.

    Writers add whole per-file batches under one lock. Reads take a copy
    under the same lock, so iteration never overlaps a write. A key that is
    added twice keeps the last record written.
    """

    def __init__(self):
        self._records: Dict[str, ScoredRecord] = {}
        self._lock = threading.Lock()

    def add_batch(self, records: Iterable[ScoredRecord]) -> int:
        batch = {record.key: record for record in records}
        with self._lock:
            self._records.update(batch)
        return len(batch)

    def records(self) -> List[ScoredRecord]:
        """Snapshot of all records, sorted by key."""
        with self._lock:
            snapshot = list(self._records.values())
        return sorted(snapshot, key=lambda r: r.key)

    def scores(self) -> Dict[str, float]:
        """Snapshot of key -> score."""
        with self._lock:
            return {key: record.score for key, record in self._records.items()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
