"""
Factory Method pattern: a framework class defers document creation to a
subclass hook.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from utils.logging_config import get_logger
from utils.exceptions import CapacityExceededError

logger = get_logger(__name__)

DEFAULT_CAPACITY = 10


class Document(ABC):
    """Abstract document declared by the framework."""

    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    @abstractmethod
    def open(self):
        pass

    @abstractmethod
    def close(self):
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"


class MyDocument(Document):
    """Concrete document defined by the client."""

    def open(self):
        print("   MyDocument: Open()")

    def close(self):
        print("   MyDocument: Close()")


class DocumentRegistry:
    """
    Ordered, append-only collection of documents.

    Args:
        capacity: Maximum number of documents, or None to grow without limit
    """

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY):
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._docs: List[Document] = []

    def is_full(self) -> bool:
        return self.capacity is not None and len(self._docs) >= self.capacity

    def check_capacity(self):
        """Raise CapacityExceededError if no more documents fit."""
        if self.is_full():
            raise CapacityExceededError(
                f"Document registry is full ({self.capacity} documents)",
                details={'capacity': self.capacity}
            )

    def append(self, doc: Document):
        self.check_capacity()
        self._docs.append(doc)

    def __len__(self):
        return len(self._docs)

    def __iter__(self):
        return iter(self._docs)

    def __getitem__(self, index: int) -> Document:
        return self._docs[index]


class Application(ABC):
    """Framework class; subclasses fill in create_document()."""

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY):
        print("Application: ctor")
        self._docs = DocumentRegistry(capacity)
        self.logger = get_logger(self.__class__.__name__)

    @property
    def documents(self) -> Tuple[Document, ...]:
        return tuple(self._docs)

    def new_document(self, name: str) -> Document:
        """Create, register and open a document through the factory hook."""
        print("Application: NewDocument()")
        self._docs.check_capacity()
        doc = self.create_document(name)
        self._docs.append(doc)
        doc.open()
        self.logger.debug(f"Registered document {name!r} ({len(self._docs)} total)")
        return doc

    def open_document(self):
        pass

    def report_docs(self):
        """Print the name of every registered document in insertion order."""
        print("Application: ReportDocs()")
        for doc in self._docs:
            print(f"   {doc.get_name()}")

    def close_documents(self):
        for doc in self._docs:
            doc.close()

    @abstractmethod
    def create_document(self, name: str) -> Document:
        """Factory method: return a new concrete document."""
        pass


class MyApplication(Application):
    """Client customization of the framework."""

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY):
        super().__init__(capacity)
        print("MyApplication: ctor")

    def create_document(self, name: str) -> Document:
        print("   MyApplication: CreateDocument()")
        return MyDocument(name)
