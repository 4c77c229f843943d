from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ReadOnlyRepository(ABC, Generic[K, V]):
    """Looks items up by key."""

    @abstractmethod
    def find(self, key: K) -> V | None: ...


class Repository(ReadOnlyRepository[K, V]):
    """Looks items up by key and stores them."""

    @abstractmethod
    def save(self, item: V) -> None: ...


class AsyncReadOnlyRepository(ABC, Generic[K, V]):
    """Awaitable counterpart of `ReadOnlyRepository`.

    Lookups are cancelled by cancelling the awaiting task.
    """

    @abstractmethod
    async def find(self, key: K) -> V | None: ...


class AsyncRepository(AsyncReadOnlyRepository[K, V]):
    @abstractmethod
    async def save(self, item: V) -> None: ...


class InMemoryRepository(Repository[K, V]):
    """Dictionary-backed repository.

    Attributes:
        key_of: Extracts the key an item is stored under.

    Example:
        >>> users = InMemoryRepository(lambda user: user.email)
        >>> users.save(User(email="ada@example.com"))
        >>> users.find("ada@example.com")
        User(email='ada@example.com')
    """

    def __init__(self, key_of: Callable[[V], K]):
        self.key_of = key_of
        self._items: dict[K, V] = {}

    def find(self, key: K) -> V | None:
        return self._items.get(key)

    def save(self, item: V) -> None:
        self._items[self.key_of(item)] = item

    def __len__(self) -> int:
        return len(self._items)


class InMemoryAsyncRepository(AsyncRepository[K, V]):
    def __init__(self, key_of: Callable[[V], K]):
        self.key_of = key_of
        self._items: dict[K, V] = {}

    async def find(self, key: K) -> V | None:
        return self._items.get(key)

    async def save(self, item: V) -> None:
        self._items[self.key_of(item)] = item

    def __len__(self) -> int:
        return len(self._items)
