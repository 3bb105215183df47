from collections import deque
from typing import Iterable, Optional
from .link_info import FrontierEntry


class FrontierQueue:
    """FIFO queue of pages waiting to be crawled

    Entries leave in the order they were added, so every page of depth d
    is dequeued before any page of depth d+1 that was discovered from it.
    """

    def __init__(self, entries: Iterable[FrontierEntry] = ()):
        self._entries: deque = deque(entries)
        self.total_enqueued = len(self._entries)

    def enqueue(self, entry: FrontierEntry):
        self._entries.append(entry)
        self.total_enqueued += 1

    def extend(self, entries: Iterable[FrontierEntry]) -> int:
        """Add several entries, returning how many were added"""
        added = 0
        for entry in entries:
            self.enqueue(entry)
            added += 1
        return added

    def dequeue(self) -> Optional[FrontierEntry]:
        """Pop the oldest entry, or None when the frontier is drained"""
        if not self._entries:
            return None
        return self._entries.popleft()

    def peek(self) -> Optional[FrontierEntry]:
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self):
        return iter(self._entries)
