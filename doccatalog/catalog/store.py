"""
Thread-safe in-memory document store.

A ``Catalog`` owns an ordered collection of documents. The collection is
held as an immutable tuple that every write replaces under a single
``threading.Lock``; readers grab the current tuple without locking, so a
reader always sees the catalog exactly as it was before or after a write,
never halfway through one.

There is no module-level catalog: the host program constructs one and
passes it to whatever needs it.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, FrozenSet, Hashable, Iterator, List, Optional, Tuple

from ..errors import CatalogUnavailableError, DocumentNotFoundError, DuplicateError
from ..models import Document
from .multimap import MultiMap


logger = logging.getLogger(__name__)

Predicate = Callable[[Document], bool]


class Catalog:
    """Registry of documents with predicate search and grouped views."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._docs: Tuple[Document, ...] = ()
        self._ids: FrozenSet[str] = frozenset()
        self._closed = False

    # ------------------------------------------------------------------
    # Writes

    def add(self, doc: Document) -> None:
        """Append ``doc``; raises ``DuplicateError`` if it is already here."""
        with self._lock:
            self._ensure_open()
            if doc.id in self._ids:
                raise DuplicateError(f"Document {doc.title!r} ({doc.id}) is already in the catalog")
            self._docs = self._docs + (doc,)
            self._ids = self._ids | {doc.id}
        logger.debug("Added %r (%s)", doc.title, doc.id)

    def remove(self, doc: Document) -> None:
        """Remove ``doc``; raises ``DocumentNotFoundError`` if absent."""
        with self._lock:
            self._ensure_open()
            if doc.id not in self._ids:
                raise DocumentNotFoundError(f"Document {doc.title!r} ({doc.id}) is not in the catalog")
            self._docs = tuple(d for d in self._docs if d.id != doc.id)
            self._ids = self._ids - {doc.id}
        logger.debug("Removed %r (%s)", doc.title, doc.id)

    def close(self) -> None:
        """Mark the catalog unavailable. Later operations raise."""
        with self._lock:
            self._closed = True
            self._docs = ()
            self._ids = frozenset()
        logger.info("Catalog closed")

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Reads

    def _ensure_open(self) -> None:
        if self._closed:
            raise CatalogUnavailableError("Catalog is closed")

    def _snapshot(self) -> Tuple[Document, ...]:
        docs = self._docs
        self._ensure_open()
        return docs

    def all(self) -> List[Document]:
        """Return a copy of the current contents in insertion order."""
        return list(self._snapshot())

    def search(self, predicate: Predicate) -> List[Document]:
        """Return every document matching ``predicate``, in insertion order."""
        return [doc for doc in self._snapshot() if predicate(doc)]

    def find_first(self, predicate: Predicate) -> Optional[Document]:
        return next((doc for doc in self._snapshot() if predicate(doc)), None)

    def get(self, title: str) -> Document:
        """Return the first document titled ``title``.

        Raises ``DocumentNotFoundError`` when no document has that title.
        """
        doc = self.find_first(lambda d: d.title == title)
        if doc is None:
            raise DocumentNotFoundError(f"No document titled {title!r}")
        return doc

    def group_by(self, key_fn: Callable[[Document], Hashable]) -> MultiMap:
        """Group one snapshot of the catalog by ``key_fn``."""
        groups: MultiMap = MultiMap()
        for doc in self._snapshot():
            groups.put(key_fn(doc), doc)
        return groups

    def titles(self) -> List[str]:
        return [doc.title for doc in self._snapshot()]

    def __len__(self) -> int:
        return len(self._snapshot())

    def __contains__(self, doc: object) -> bool:
        doc_id = getattr(doc, "id", None)
        return doc_id is not None and doc_id in self._ids

    def __iter__(self) -> Iterator[Document]:
        return iter(self._snapshot())

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._docs)} documents"
        return f"<Catalog {state}>"
