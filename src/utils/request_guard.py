"""
Per-view request generations

Each refresh takes a ticket; only the newest ticket may publish its
result, so a slow stale response cannot overwrite newer state.
"""

from typing import Dict


class RequestGeneration:
    """Monotonic counter for one view"""

    def __init__(self, name: str = "view"):
        self.name = name
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def next(self) -> int:
        """Start a new request and return its ticket"""
        self._current += 1
        return self._current

    def is_current(self, ticket: int) -> bool:
        return ticket == self._current


class RequestGenerations:
    """Generations keyed by view name"""

    def __init__(self):
        self._generations: Dict[str, RequestGeneration] = {}

    def for_view(self, name: str) -> RequestGeneration:
        if name not in self._generations:
            self._generations[name] = RequestGeneration(name)
        return self._generations[name]
