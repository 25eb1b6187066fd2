from __future__ import annotations

import collections
import threading
from collections.abc import Iterable, Iterator, MutableMapping, MutableSequence, MutableSet
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from sortedcontainers import SortedDict, SortedSet

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CollectionError(Exception):
    """Base class for failures raised by the collection facades."""


class IndexOutOfRangeError(CollectionError, IndexError):
    """Raised when a sequence position falls outside the valid range."""

    def __init__(self, index: int, size: int, upper: int) -> None:
        super().__init__(f"index {index} out of range [0, {upper}] for size {size}")
        self.index = index
        self.size = size


class NullKeyError(CollectionError, TypeError):
    """Raised when a sorted backing is handed a ``None`` or incomparable key or element."""


class UnknownBackingError(CollectionError, KeyError):
    """Raised when a backing name is not present in a registry."""


class SynchronizedList(MutableSequence):
    """List whose every operation, compound ones included, runs under a re-entrant lock."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._lock = threading.RLock()
        self._items: list[Any] = list(items)

    def __getitem__(self, index):
        with self._lock:
            return self._items[index]

    def __setitem__(self, index, value) -> None:
        with self._lock:
            self._items[index] = value

    def __delitem__(self, index) -> None:
        with self._lock:
            del self._items[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)

    def insert(self, index: int, value: Any) -> None:
        with self._lock:
            self._items.insert(index, value)

    def append(self, value: Any) -> None:
        with self._lock:
            self._items.append(value)

    def extend(self, values: Iterable[Any]) -> None:
        values = list(values)
        with self._lock:
            self._items.extend(values)

    def __iadd__(self, values: Iterable[Any]) -> SynchronizedList:
        self.extend(values)
        return self

    def pop(self, index: int = -1) -> Any:
        with self._lock:
            return self._items.pop(index)

    def remove(self, value: Any) -> None:
        with self._lock:
            self._items.remove(value)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def reverse(self) -> None:
        with self._lock:
            self._items.reverse()

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._items

    def index(self, value: Any, *args) -> int:
        with self._lock:
            return self._items.index(value, *args)

    def count(self, value: Any) -> int:
        with self._lock:
            return self._items.count(value)


class SynchronizedDict(MutableMapping):
    """Dict whose every operation, compound ones included, runs under a re-entrant lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._items: dict[Any, Any] = {}

    def __getitem__(self, key):
        with self._lock:
            return self._items[key]

    def __setitem__(self, key, value) -> None:
        with self._lock:
            self._items[key] = value

    def __delitem__(self, key) -> None:
        with self._lock:
            del self._items[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)

    def get(self, key, default=None):
        with self._lock:
            return self._items.get(key, default)

    def pop(self, key, *default):
        with self._lock:
            return self._items.pop(key, *default)

    def popitem(self):
        with self._lock:
            return self._items.popitem()

    def setdefault(self, key, default=None):
        with self._lock:
            return self._items.setdefault(key, default)

    def update(self, *args, **kwargs) -> None:
        with self._lock:
            self._items.update(*args, **kwargs)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items


class InsertionOrderedSet(MutableSet):
    """Set that iterates in insertion order, backed by dict keys."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: dict[Any, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: Any) -> None:
        self._items.setdefault(item, None)

    def discard(self, item: Any) -> None:
        self._items.pop(item, None)


@dataclass(frozen=True)
class Backing:
    """One concrete container implementation that a facade can wrap."""

    name: str
    factory: Callable[[], Any]
    ordering: str
    thread_safe: bool = False
    allows_null: bool = True
    description: str = ""

    def create(self) -> Any:
        return self.factory()


SEQUENCE_BACKINGS: dict[str, Backing] = {
    backing.name: backing
    for backing in (
        Backing(
            name="ArrayList",
            factory=list,
            ordering="positional",
            description="Resizable array; O(1) indexed access, O(n) shifts on middle insert/remove.",
        ),
        Backing(
            name="LinkedList",
            factory=collections.deque,
            ordering="positional",
            description="Doubly linked blocks; cheap at both ends, O(n) traversal for indexed access.",
        ),
        Backing(
            name="Vector",
            factory=SynchronizedList,
            ordering="positional",
            thread_safe=True,
            description="Resizable array with every operation under a lock.",
        ),
    )
}

MAP_BACKINGS: dict[str, Backing] = {
    backing.name: backing
    for backing in (
        Backing(
            name="HashMap",
            factory=dict,
            ordering="unspecified",
            description="Hash table; O(1) get/put/remove, order not part of the contract.",
        ),
        Backing(
            name="LinkedHashMap",
            factory=collections.OrderedDict,
            ordering="insertion",
            description="Hash table plus linked entries; iterates in insertion order.",
        ),
        Backing(
            name="TreeMap",
            factory=SortedDict,
            ordering="sorted",
            allows_null=False,
            description="Sorted keys; O(log n) get/put/remove, iterates in ascending key order.",
        ),
        Backing(
            name="ConcurrentHashMap",
            factory=SynchronizedDict,
            ordering="unspecified",
            thread_safe=True,
            description="Hash table with every operation under a lock.",
        ),
    )
}

SET_BACKINGS: dict[str, Backing] = {
    backing.name: backing
    for backing in (
        Backing(
            name="HashSet",
            factory=set,
            ordering="unspecified",
            description="Hash table of unique elements; order not part of the contract.",
        ),
        Backing(
            name="LinkedHashSet",
            factory=InsertionOrderedSet,
            ordering="insertion",
            description="Hash table of unique elements; iterates in insertion order.",
        ),
        Backing(
            name="TreeSet",
            factory=SortedSet,
            ordering="sorted",
            allows_null=False,
            description="Sorted unique elements; iterates in ascending order.",
        ),
    )
}


def get_backing(registry: dict[str, Backing], name: str) -> Backing:
    try:
        return registry[name]
    except KeyError as exc:
        raise UnknownBackingError(
            f"unknown backing {name!r}; expected one of {', '.join(registry)}"
        ) from exc


def _check_index(index: int, size: int, upper: int) -> None:
    if index < 0 or index > upper:
        raise IndexOutOfRangeError(index, size, upper)


class SequenceCollection(Generic[T]):
    """Positional facade over a list-like backing."""

    def __init__(self, backing: Backing) -> None:
        self.backing = backing
        self._items: MutableSequence[T] = backing.create()

    @property
    def items(self) -> MutableSequence[T]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def append(self, item: T) -> None:
        self._items.append(item)

    def insert_at(self, item: T, index: int) -> None:
        size = len(self._items)
        _check_index(index, size, size)
        self._items.insert(index, item)

    def get(self, index: int) -> T:
        size = len(self._items)
        _check_index(index, size, size - 1)
        return self._items[index]

    def remove_at(self, index: int) -> T:
        size = len(self._items)
        _check_index(index, size, size - 1)
        item = self._items[index]
        del self._items[index]
        return item


class MapCollection(Generic[K, V]):
    """Key/value facade over a dict-like backing."""

    def __init__(self, backing: Backing) -> None:
        self.backing = backing
        self._items: MutableMapping[K, V] = backing.create()

    @property
    def items(self) -> MutableMapping[K, V]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def keys(self) -> list[K]:
        return list(self._items)

    def put(self, key: K, value: V) -> None:
        if self.backing.allows_null:
            self._items[key] = value
            return
        if key is None:
            raise NullKeyError(f"{self.backing.name} does not accept None keys")
        # SortedDict orders the key before touching its dict, so a failed
        # comparison leaves the map unchanged.
        try:
            self._items[key] = value
        except TypeError as exc:
            raise NullKeyError(f"{self.backing.name} cannot order key {key!r}") from exc

    def get(self, key: K) -> Optional[V]:
        return self._items.get(key)

    def remove_key(self, key: K) -> None:
        self._items.pop(key, None)


class SetCollection(Generic[T]):
    """Membership facade over a set-like backing."""

    def __init__(self, backing: Backing) -> None:
        self.backing = backing
        self._items: MutableSet[T] = backing.create()

    @property
    def items(self) -> MutableSet[T]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def add(self, item: T) -> bool:
        if item is None and not self.backing.allows_null:
            raise NullKeyError(f"{self.backing.name} does not accept None elements")
        if item in self._items:
            return False
        if not self.backing.allows_null:
            # SortedSet.add updates its hash set before ordering the element,
            # so comparability is checked up front with a read-only bisect.
            try:
                self._items.bisect_left(item)
            except TypeError as exc:
                raise NullKeyError(f"{self.backing.name} cannot order element {item!r}") from exc
        self._items.add(item)
        return True

    def remove(self, item: T) -> None:
        self._items.discard(item)


__all__ = [
    "MAP_BACKINGS",
    "SEQUENCE_BACKINGS",
    "SET_BACKINGS",
    "Backing",
    "CollectionError",
    "IndexOutOfRangeError",
    "InsertionOrderedSet",
    "MapCollection",
    "NullKeyError",
    "SequenceCollection",
    "SetCollection",
    "SynchronizedDict",
    "SynchronizedList",
    "UnknownBackingError",
    "get_backing",
]
