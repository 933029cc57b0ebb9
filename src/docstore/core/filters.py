"""Search predicates: each tests one dimension of a SearchRequest against a Document"""

from datetime import datetime
from typing import Optional

from docstore.core.models import Document, SearchRequest
from docstore.core.utils.dates import as_utc


def match_title_prefixes(doc: Document, prefixes: Optional[list[str]]) -> bool:
    """Pass when no prefixes are given or the title starts with any of them (case-sensitive)."""
    if not prefixes:
        return True
    if doc.title is None:
        return False
    return any(doc.title.startswith(p) for p in prefixes)


def match_authors(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """Pass when no author ids are given or the document's author id is one of them."""
    if not author_ids:
        return True
    if doc.author is None:
        return False
    return doc.author.id in author_ids


def match_contents(doc: Document, needles: Optional[list[str]]) -> bool:
    """Pass when no substrings are given or the content contains any of them (case-sensitive)."""
    if not needles:
        return True
    if doc.content is None:
        return False
    return any(n in doc.content for n in needles)


def match_created(doc: Document, created_from: Optional[datetime], created_to: Optional[datetime]) -> bool:
    """Pass when created falls within [created_from, created_to]; either bound may be omitted.

    Naive datetimes are compared as UTC.
    """
    if created_from is None and created_to is None:
        return True
    if doc.created is None:
        return False
    created, created_from, created_to = as_utc(doc.created), as_utc(created_from), as_utc(created_to)
    if created_from is not None and created < created_from:
        return False
    if created_to is not None and created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """True when the document passes every predicate of the request."""
    return (
        match_title_prefixes(doc, request.title_prefixes)
        and match_authors(doc, request.author_ids)
        and match_contents(doc, request.contains_contents)
        and match_created(doc, request.created_from, request.created_to)
    )
