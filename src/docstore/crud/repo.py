from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Insert or replace by id; assign an id when missing. Return the stored document."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return documents matching every filter of request, in storage order; [] for None."""
        raise NotImplementedError
