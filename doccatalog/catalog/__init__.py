"""
Catalog package: the document store, its grouped views and the indexer.

``Catalog`` in ``store`` owns the documents and is safe to share between
threads. ``MultiMap`` is what ``Catalog.group_by`` returns. ``run_index``
sweeps a catalog's titles on a worker thread and waits for the result.
"""

from .indexer import run_index  # noqa: F401
from .multimap import MultiMap  # noqa: F401
from .store import Catalog  # noqa: F401
