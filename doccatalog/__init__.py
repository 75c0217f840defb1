"""
In-memory, thread-safe document catalog.

Documents are built and validated by ``build()``, registered in a
``Catalog`` the host program constructs, borrowed through a
``BorrowLedger``, and queried by predicate or grouping key. ``run_index``
sweeps a catalog's titles on a worker thread, and ``describe_with_premium``
renders the premium variant of a document's description.
"""

from .catalog import Catalog, MultiMap, run_index  # noqa: F401
from .config import Settings, configure_logging, get_settings  # noqa: F401
from .errors import (  # noqa: F401
    CatalogError,
    CatalogUnavailableError,
    DocumentNotFoundError,
    DuplicateError,
    IndexerTimeoutError,
    NotBorrowedError,
    ValidationError,
)
from .ledger import BorrowLedger  # noqa: F401
from .models import (  # noqa: F401
    Book,
    Document,
    DocumentStatus,
    Periodical,
    Staff,
    Student,
    User,
    build,
    build_user,
)
from .presentation import describe, describe_with_premium  # noqa: F401
