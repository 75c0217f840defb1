"""
Background title sweep over a catalog.

``run_index`` hands the sweep to a worker thread and waits for it, the
same way a caller would start a thread and join it. The worker reads a
single catalog snapshot, so the titles it returns reflect the catalog
either entirely before or entirely after any concurrent write.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from ..config import get_settings
from ..errors import CatalogUnavailableError, IndexerTimeoutError
from .store import Catalog


logger = logging.getLogger(__name__)

_FROM_SETTINGS = object()


def _sweep(catalog: Catalog) -> List[str]:
    titles = catalog.titles()
    for title in titles:
        logger.debug("Indexing: %s", title)
    return titles


def run_index(
    catalog: Optional[Catalog],
    timeout: Any = _FROM_SETTINGS,
) -> List[str]:
    """Index ``catalog`` on a worker thread and return the titles it saw.

    Parameters
    ----------
    catalog : Optional[Catalog]
        The catalog to sweep. ``None`` or a closed catalog raises
        ``CatalogUnavailableError``.
    timeout : Optional[float]
        Seconds to wait for the worker. ``None`` waits until the worker
        finishes. When omitted, ``INDEXER_TIMEOUT_SECONDS`` from the
        settings applies, and that is unlimited unless configured.

    Returns
    -------
    List[str]
        Document titles in catalog insertion order.
    """
    if catalog is None:
        raise CatalogUnavailableError("No catalog to index")
    if catalog.closed:
        raise CatalogUnavailableError("Catalog is closed")

    settings = get_settings()
    if timeout is _FROM_SETTINGS:
        timeout = settings.INDEXER_TIMEOUT_SECONDS

    result: List[str] = []
    errors: List[BaseException] = []

    def _worker() -> None:
        try:
            result.extend(_sweep(catalog))
        except BaseException as exc:  # re-raised in the calling thread
            errors.append(exc)

    thread = threading.Thread(target=_worker, name=settings.INDEXER_THREAD_NAME, daemon=True)
    thread.start()
    thread.join(timeout)
    if thread.is_alive():
        raise IndexerTimeoutError(f"Indexer did not finish within {timeout}s")
    if errors:
        raise errors[0]
    logger.info("Indexed %d documents", len(result))
    return result
