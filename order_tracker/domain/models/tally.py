"""
Thread-safe per-status counter shared by all lookups of a run.
"""

import threading
from typing import Iterable

from .status import StatusCategory


class Tally:
    """
    Per-category counts, all starting at zero.

    Every mutation goes through ``increment`` which holds the lock for the
    whole read-modify-write, so concurrent writers never lose an update.
    """

    def __init__(self, categories: Iterable[StatusCategory] = tuple(StatusCategory)):
        self._counts: dict[StatusCategory, int] = {category: 0 for category in categories}
        self._lock = threading.Lock()

    def increment(self, category: StatusCategory) -> None:
        """Add one to ``category``."""
        with self._lock:
            self._counts[category] = self._counts.get(category, 0) + 1

    def get(self, category: StatusCategory) -> int:
        with self._lock:
            return self._counts.get(category, 0)

    def __getitem__(self, category: StatusCategory) -> int:
        return self.get(category)

    @property
    def total(self) -> int:
        """Sum of every category count."""
        with self._lock:
            return sum(self._counts.values())

    def snapshot(self) -> dict[StatusCategory, int]:
        """Copy of the counts in category declaration order."""
        with self._lock:
            return {category: self._counts.get(category, 0) for category in StatusCategory}

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by category value, for logging and JSON output."""
        return {category.value: count for category, count in self.snapshot().items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tally):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        counts = ", ".join(f"{key}={value}" for key, value in self.as_dict().items())
        return f"Tally({counts})"
