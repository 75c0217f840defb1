# doccatalog/presentation.py
from __future__ import annotations

from .config import get_settings
from .models import Book, Document, Periodical


def describe(doc: Document) -> str:
    """One-line description of a document, chosen by its kind."""
    if isinstance(doc, Book):
        return f"Book: {doc.title}"
    if isinstance(doc, Periodical):
        if doc.issue is not None:
            return f"Periodical: {doc.title} (issue {doc.issue})"
        return f"Periodical: {doc.title}"
    raise TypeError(f"Cannot describe {type(doc).__name__}")


def describe_with_premium(doc: Document) -> str:
    """The base description followed by the premium annotation line."""
    return f"{describe(doc)}\n{get_settings().PREMIUM_ANNOTATION}"
