"""
Per-user record of borrowed documents.

The ledger maps each user, by identity, to the ordered list of documents
they have borrowed. It only references documents; the catalog stays
their owner, and returning a document never touches the catalog. All reads
and writes of the mapping are synchronised with one ``threading.Lock``.

Borrowing does not check availability: a document can be borrowed again
while someone already holds it, and the same user can hold it twice.
``status()`` and ``is_available()`` report the current state for callers
that want to enforce their own policy.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List

from .errors import NotBorrowedError
from .models import Document, DocumentStatus, User


logger = logging.getLogger(__name__)


class BorrowLedger:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._borrowed: Dict[str, List[Document]] = {}

    def borrow(self, user: User, doc: Document) -> None:
        """Record that ``user`` borrowed ``doc``. Always succeeds."""
        with self._lock:
            self._borrowed.setdefault(user.id, []).append(doc)
        logger.debug("%s borrows %s", user.name, doc.title)

    def return_item(self, user: User, doc: Document) -> None:
        """Remove the first occurrence of ``doc`` from ``user``'s list.

        Raises
        ------
        NotBorrowedError
            If ``user`` does not currently hold ``doc``.
        """
        with self._lock:
            docs = self._borrowed.get(user.id, [])
            for i, held in enumerate(docs):
                if held.id == doc.id:
                    del docs[i]
                    break
            else:
                raise NotBorrowedError(f"{user.name} has not borrowed {doc.title!r}")
        logger.debug("%s returned %s", user.name, doc.title)

    def borrowed(self, user: User) -> List[Document]:
        """Return a copy of ``user``'s borrowed documents, oldest first."""
        with self._lock:
            return list(self._borrowed.get(user.id, []))

    def clear(self, user: User) -> None:
        """Forget every document ``user`` holds."""
        with self._lock:
            self._borrowed.pop(user.id, None)

    def status(self, doc: Document) -> DocumentStatus:
        with self._lock:
            held = any(d.id == doc.id for docs in self._borrowed.values() for d in docs)
        return DocumentStatus.BORROWED if held else DocumentStatus.AVAILABLE

    def is_available(self, doc: Document) -> bool:
        return self.status(doc) is DocumentStatus.AVAILABLE
