"""In-memory document store: ordered upsert, id lookup and filtered scan"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from docstore.config import Settings, load_config
from docstore.core.errors import InvalidArgumentError
from docstore.core.filters import matches
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.ids import is_blank, new_id
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """Ordered, unsynchronized collection of documents.

    Seed documents are saved one by one, so blank ids are filled in and
    duplicate ids collapse onto the first position. Settings default to
    load_config().

    Not safe for concurrent mutation; callers sharing a store across threads
    must serialize access themselves.
    """
    documents: list[Document] = field(default_factory=list)
    settings: Settings = field(default_factory=load_config)

    def __post_init__(self) -> None:
        seed, self.documents = self.documents, []
        for doc in seed:
            self.save(doc)

    def __len__(self) -> int:
        return len(self.documents)

    def save(self, document: Document) -> Document:
        """Upsert a document by id.

        A missing or blank id is replaced with a generated one on the passed
        instance. An existing entry with the same id is overwritten at its
        current position; otherwise the document is appended. With
        settings.preserve_created a stored `created`, once set, survives the overwrite.
        Raises InvalidArgumentError if document is None.
        """
        if document is None:
            raise InvalidArgumentError("document must not be None")

        if is_blank(document.id):
            document.id = new_id()
            logger.debug("Assigned id %s", document.id)

        for i, stored in enumerate(self.documents):
            if stored.id == document.id:
                if self.settings.preserve_created and stored.created is not None:
                    document.created = stored.created
                self.documents[i] = document
                logger.debug("Updated document %s at position %d", document.id, i)
                return document

        self.documents.append(document)
        logger.debug("Inserted document %s at position %d", document.id, len(self.documents) - 1)
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the first document with the given id, or None if not found."""
        return next((d for d in self.documents if d.id == doc_id), None)

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return documents passing every filter of request, in storage order.

        A None request yields an empty list rather than every document.
        """
        if request is None:
            return []
        results = [d for d in self.documents if matches(d, request)]
        logger.debug("Search matched %d of %d document(s)", len(results), len(self.documents))
        return results

    def all(self) -> list[Document]:
        """Return a copy of the stored documents in storage order."""
        return list(self.documents)
