"""A string-keyed hash map with separate chaining, and duplicate removal."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

V = T = TypeVar("V")
H = TypeVar("H", bound=Hashable)

_INITIAL_BUCKETS = 5
_MAX_LOAD_FACTOR = 0.7
_HASH_COEFFICIENT = 37


@dataclass
class _Entry(Generic[V]):
    key: str
    value: V


class OurMap(Generic[V]):
    """Map from strings to values, stored in chained buckets.

    The table starts with five buckets and doubles whenever the load factor
    goes above 0.7. New keys are put at the front of their bucket's chain.
    """

    def __init__(self) -> None:
        self._buckets: list[list[_Entry[V]]] = self._empty_buckets(_INITIAL_BUCKETS)
        self._count = 0

    @staticmethod
    def _empty_buckets(number: int) -> list[list[_Entry[V]]]:
        return [[] for _ in range(number)]

    def _bucket_for(self, key: str) -> list[_Entry[V]]:
        size = len(self._buckets)
        code, coefficient = 0, 1
        for char in reversed(key):
            code = (code + ord(char) * coefficient) % size
            coefficient = coefficient * _HASH_COEFFICIENT % size
        return self._buckets[code]

    def _find(self, key: str) -> _Entry[V] | None:
        return next((entry for entry in self._bucket_for(key) if entry.key == key), None)

    def _rehash(self) -> None:
        old_buckets = self._buckets
        self._buckets = self._empty_buckets(2 * len(old_buckets))
        self._count = 0
        for bucket in old_buckets:
            for entry in bucket:
                self.insert(entry.key, entry.value)

    def insert(self, key: str, value: V) -> None:
        """Set ``key`` to ``value``, adding the key if it is new."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._bucket_for(key).insert(0, _Entry(key, value))
        self._count += 1
        if self.load_factor() > _MAX_LOAD_FACTOR:
            self._rehash()

    def get(self, key: str) -> V:
        """Return the value of ``key``; raise KeyError if it is absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def remove(self, key: str) -> V:
        """Delete ``key`` and return its value; raise KeyError if it is absent."""
        bucket = self._bucket_for(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._count -= 1
                return entry.value
        raise KeyError(key)

    def load_factor(self) -> float:
        """Return the number of entries per bucket."""
        return self._count / len(self._buckets)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __getitem__(self, key: str) -> V:
        return self.get(key)

    def __setitem__(self, key: str, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)


def remove_duplicates(items: Iterable[H]) -> list[H]:
    """Return the items without repeats, each kept at its first occurrence."""
    return list(dict.fromkeys(items))