"""Sender that stores records as documents in a collection.

The store only needs pymongo's ``Database.get_collection(name)`` and the
collection ``insert_one(document)``; ``MemoryStore`` provides the same pair.
"""

import logging
import time
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from log_router.exceptions import InvalidArgumentError
from log_router.senders.base import SenderBase

logger = logging.getLogger(__name__)


@runtime_checkable
class Collection(Protocol):
    def insert_one(self, document: dict) -> Any: ...


@runtime_checkable
class DocumentStore(Protocol):
    def get_collection(self, name: str) -> Collection: ...


def store_timestamp() -> int:
    """Current wall-clock time in integer milliseconds."""
    return int(time.time() * 1000)


class MongodbSender(SenderBase):
    """Insert one ``{level, message, context}`` document per record.

    Args:
        accepted_levels: Levels to store; empty stores everything.
        store: Backend used to open *collection* when it is given by name.
        collection: A collection name, or a handle exposing ``insert_one()``.

    Raises:
        InvalidArgumentError: If *collection* is neither a non-empty name nor
            a collection handle, or a name is given without a usable store.
    """

    def __init__(self, accepted_levels, store, collection):
        super().__init__(accepted_levels)
        if isinstance(collection, str):
            if not collection:
                raise InvalidArgumentError("MongodbSender: collection name is empty")
            if not isinstance(store, DocumentStore):
                raise InvalidArgumentError(
                    "MongodbSender: store must provide get_collection() "
                    "when the collection is given by name"
                )
            self.store = store.get_collection(collection)
            logger.info("Storing log records in collection %r", collection)
        elif isinstance(collection, Collection):
            self.store = collection
        else:
            raise InvalidArgumentError(
                "MongodbSender: collection must be a name or a collection, "
                f"got {type(collection).__name__}"
            )

    @staticmethod
    def build_context(context, timestamp: int) -> dict:
        """Return a copy of *context* with ``timestamp.store`` set.

        Neither *context* nor a ``timestamp`` mapping nested in it is
        modified; both are copied before the store timestamp is added.
        """
        result = dict(context) if context else {}
        existing = result.get("timestamp")
        if isinstance(existing, Mapping):
            stamps = dict(existing)
        elif existing is None:
            stamps = {}
        else:
            stamps = {"value": existing}
        stamps["store"] = timestamp
        result["timestamp"] = stamps
        return result

    def write(self, level, message, context):
        document = {
            "level": level,
            "message": message,
            "context": self.build_context(context, store_timestamp()),
        }
        self.store.insert_one(document)
