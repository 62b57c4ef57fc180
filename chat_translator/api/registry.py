"""
Action Registry
===============
Keeps result actions alive between a query and its activation.
"""
import threading
import uuid
from collections import OrderedDict
from typing import Optional

from chat_translator.models.results import ResultItem


class ActionRegistry:
    """
    Bounded, thread-safe map of result id -> ResultItem.

    Oldest entries are evicted first once the limit is reached.
    """

    def __init__(self, max_entries: int = 200):
        self.max_entries = max_entries
        self._items: "OrderedDict[str, ResultItem]" = OrderedDict()
        self._lock = threading.Lock()

    def register(self, item: ResultItem) -> Optional[str]:
        """Store an actionable item and return its id; None for plain items."""
        if not item.actionable:
            return None
        result_id = uuid.uuid4().hex
        with self._lock:
            self._items[result_id] = item
            while len(self._items) > self.max_entries:
                self._items.popitem(last=False)
        return result_id

    def get(self, result_id: str) -> Optional[ResultItem]:
        with self._lock:
            return self._items.get(result_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
