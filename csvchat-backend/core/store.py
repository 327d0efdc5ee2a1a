import threading
from typing import Dict, Iterable, Optional, Tuple

Row = Dict[str, str]


class DatasetStore:
    """
    Holds the rows of the most recently uploaded CSV.

    Writers hand over a fully parsed row list; it is copied into a new tuple
    and swapped in under a lock, so readers see either the old dataset or the
    new one and never a half-filled one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._rows: Tuple[Row, ...] = ()
        self._filename: Optional[str] = None

    def replace(self, rows: Iterable[Row], filename: Optional[str] = None) -> int:
        new_rows = tuple(rows)
        with self._lock:
            self._rows = new_rows
            self._filename = filename
        return len(new_rows)

    def snapshot(self) -> Tuple[Row, ...]:
        with self._lock:
            return self._rows

    @property
    def filename(self) -> Optional[str]:
        return self._filename

    def clear(self) -> None:
        self.replace((), None)

    def __len__(self) -> int:
        return len(self.snapshot())


dataset = DatasetStore()
