"""In-memory document store exposing the pymongo calls MongodbSender uses."""

import collections
import copy
import threading


class MemoryCollection:
    """Thread-safe bounded collection backed by a deque."""

    def __init__(self, name: str, max_size: int = 10000):
        self.name = name
        self._documents = collections.deque(maxlen=max_size)
        self._lock = threading.Lock()
        self._total_count = 0

    def insert_one(self, document: dict) -> None:
        """Append a copy of *document*; the oldest one is evicted when full."""
        with self._lock:
            self._documents.append(copy.deepcopy(document))
            self._total_count += 1

    def find(self, level: int | None = None) -> list[dict]:
        """Return stored documents oldest first, optionally for one level."""
        with self._lock:
            documents = list(self._documents)
        if level is None:
            return documents
        return [d for d in documents if d.get("level") == level]

    def get_recent(self, count: int = 50) -> list[dict]:
        """Return the last *count* documents, most recent first."""
        with self._lock:
            return list(self._documents)[-count:][::-1]

    @property
    def total_count(self) -> int:
        """Total number of documents ever inserted."""
        return self._total_count

    @property
    def current_size(self) -> int:
        """Number of documents currently held."""
        return len(self._documents)

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
            self._total_count = 0


class MemoryStore:
    """Get-or-create collections by name, like ``pymongo.database.Database``."""

    def __init__(self, max_size: int = 10000):
        self._max_size = max_size
        self._collections: dict[str, MemoryCollection] = {}
        self._lock = threading.Lock()

    def get_collection(self, name: str) -> MemoryCollection:
        with self._lock:
            collection = self._collections.get(name)
            if collection is None:
                collection = MemoryCollection(name, self._max_size)
                self._collections[name] = collection
            return collection

    def list_collection_names(self) -> list[str]:
        with self._lock:
            return sorted(self._collections)
