"""
Recipe Cache for priced recipe sets.

Memoizes assembled recipes by input ingredient set. Capacity is counted in
entries; once exceeded, the oldest-inserted keys are evicted first. Reads do
not refresh an entry's position (FIFO, not LRU) and entries never expire.
"""
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Sequence
import logging
import threading

from models.recipe import Recipe

# Set up logging
logger = logging.getLogger(__name__)

KEY_DELIMITER = ","


class RecipeCache:
    """Bounded insertion-ordered cache of priced recipe sets"""

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: "OrderedDict[str, tuple]" = OrderedDict()
        # Guards entries and stats when one instance serves several threads
        self._lock = threading.Lock()

        # Track cache statistics
        self.stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0
        }

    @staticmethod
    def key(ingredients: Iterable[str]) -> str:
        """Order- and case-insensitive key for an ingredient set"""
        return KEY_DELIMITER.join(sorted(item.strip().lower() for item in ingredients))

    def get(self, key: str) -> Optional[List[Recipe]]:
        """Return cached recipes for a key, or None on a miss"""
        with self._lock:
            cached = self._entries.get(key)
            if cached is None:
                self.stats["misses"] += 1
                logger.debug(f"Cache miss for '{key}'")
                return None
            self.stats["hits"] += 1
        logger.debug(f"Cache hit for '{key}'")
        return list(cached)

    def put(self, key: str, recipes: Sequence[Recipe]) -> None:
        """Insert or overwrite an entry, then evict oldest entries over capacity"""
        with self._lock:
            # Overwrites keep the original insertion position
            self._entries[key] = tuple(recipes)
            while len(self._entries) > self.capacity:
                evicted_key, _ = self._entries.popitem(last=False)
                self.stats["evictions"] += 1
                logger.debug(f"Evicted '{evicted_key}' from recipe cache")

    def has_recipes(self, key: str) -> bool:
        """Check if a key is cached without touching the stats"""
        with self._lock:
            return key in self._entries

    def __contains__(self, key: str) -> bool:
        return self.has_recipes(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> List[str]:
        """Cached keys, oldest first"""
        with self._lock:
            return list(self._entries.keys())

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics"""
        with self._lock:
            stats = self.stats.copy()
            stats["size"] = len(self._entries)
            stats["capacity"] = self.capacity
        return stats

    def clear_cache(self):
        """Clear the recipe cache"""
        with self._lock:
            self._entries.clear()
        logger.debug("Cache cleared")
