from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ulid import ULID

T = TypeVar("T")
TId = TypeVar("TId")


class DataWriter(ABC, Generic[T]):
    @abstractmethod
    def write(self, data: T) -> None: ...


class IdGeneratingDataWriter(ABC, Generic[T, TId]):
    """A writer that reports the identifier assigned to written data."""

    @abstractmethod
    def write(self, data: T) -> TId: ...


class InMemoryDataWriter(DataWriter[T]):
    def __init__(self) -> None:
        self.written: list[T] = []

    def write(self, data: T) -> None:
        self.written.append(data)


class InMemoryULIDDataWriter(IdGeneratingDataWriter[T, ULID]):
    """Stores written data under freshly generated ULIDs."""

    def __init__(self) -> None:
        self.written: dict[ULID, T] = {}

    def write(self, data: T) -> ULID:
        data_id = ULID()
        self.written[data_id] = data
        return data_id
