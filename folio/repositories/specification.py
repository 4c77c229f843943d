"""Specification-based repositories.

A specification describes *what* to look up without saying *how*. A
repository advertises the specifications it understands by implementing
`HandlesSpecification` for each of them; the key-based repositories here
are the simplest case, handling `KeySpecification` only.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
S = TypeVar("S", bound="Specification")


class Specification(BaseModel, Generic[T]):
    """Marker base for lookups of items of type T.

    Examples:
        >>> class ActiveUsersInCountry(Specification[list[User]]):
        ...     country: str
    """

    model_config = ConfigDict(frozen=True)


class KeySpecification(Specification[T], Generic[T, K]):
    """Looks up a single item by its key."""

    key: K


class HandlesSpecification(ABC, Generic[S, T]):
    @abstractmethod
    def find(self, specification: S) -> T: ...


class HandlesSpecificationAsync(ABC, Generic[S, T]):
    @abstractmethod
    async def find(self, specification: S) -> T: ...


class SpecificationReadOnlyRepository(
    HandlesSpecification[KeySpecification[V, K], V], Generic[K, V]
):
    """Repository answering `KeySpecification` lookups."""

    pass


class SpecificationRepository(SpecificationReadOnlyRepository[K, V]):
    @abstractmethod
    def save(self, item: V) -> None: ...


class AsyncSpecificationReadOnlyRepository(
    HandlesSpecificationAsync[KeySpecification[V, K], V], Generic[K, V]
):
    pass


class AsyncSpecificationRepository(AsyncSpecificationReadOnlyRepository[K, V]):
    @abstractmethod
    async def save(self, item: V) -> None: ...


class InMemorySpecificationRepository(SpecificationRepository[K, V]):
    """Dictionary-backed specification repository.

    Unlike `InMemoryRepository`, a lookup for an unknown key raises
    `KeyError` since the contract promises an item.
    """

    def __init__(self, key_of: Callable[[V], K]):
        self.key_of = key_of
        self._items: dict[K, V] = {}

    def find(self, specification: KeySpecification[V, K]) -> V:
        return self._items[specification.key]

    def save(self, item: V) -> None:
        self._items[self.key_of(item)] = item
