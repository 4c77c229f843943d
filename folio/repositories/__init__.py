"""Repository, specification and writer contracts.

This package provides:
- Key-based repositories, blocking and awaitable
- Specification-based repositories and the Specification marker
- Data writers, with and without generated identifiers
- In-memory implementations of each, for tests and prototypes
"""

from .repository import (
    AsyncReadOnlyRepository,
    AsyncRepository,
    InMemoryAsyncRepository,
    InMemoryRepository,
    ReadOnlyRepository,
    Repository,
)
from .specification import (
    AsyncSpecificationReadOnlyRepository,
    AsyncSpecificationRepository,
    HandlesSpecification,
    HandlesSpecificationAsync,
    InMemorySpecificationRepository,
    KeySpecification,
    Specification,
    SpecificationReadOnlyRepository,
    SpecificationRepository,
)
from .writer import DataWriter, IdGeneratingDataWriter, InMemoryDataWriter, InMemoryULIDDataWriter

__all__ = [
    # Key-based repositories
    "ReadOnlyRepository",
    "Repository",
    "AsyncReadOnlyRepository",
    "AsyncRepository",
    "InMemoryRepository",
    "InMemoryAsyncRepository",
    # Specifications
    "Specification",
    "KeySpecification",
    "HandlesSpecification",
    "HandlesSpecificationAsync",
    "SpecificationReadOnlyRepository",
    "SpecificationRepository",
    "AsyncSpecificationReadOnlyRepository",
    "AsyncSpecificationRepository",
    "InMemorySpecificationRepository",
    # Writers
    "DataWriter",
    "IdGeneratingDataWriter",
    "InMemoryDataWriter",
    "InMemoryULIDDataWriter",
]
