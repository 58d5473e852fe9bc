"""A string-keyed hash map with FNV-1a hashing and chained buckets."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

FNV1A_32_OFFSET = 0x811C9DC5
FNV1A_32_PRIME = 0x01000193
BUCKETS_AMOUNT = 255

_MASK_32 = 0xFFFFFFFF


def fnv1a_hash(key: str) -> int:
    """Return the 32-bit FNV-1a hash of the UTF-8 bytes of ``key``."""
    value = FNV1A_32_OFFSET
    for byte in key.encode("utf-8"):
        value ^= byte
        value = (value * FNV1A_32_PRIME) & _MASK_32
    return value


def bucket_index(key: str) -> int:
    """Return the bucket a key falls into."""
    return fnv1a_hash(key) % BUCKETS_AMOUNT


class Hashmap:
    """Map of string keys to values, iterated in bucket order."""

    def __init__(self) -> None:
        self._buckets: list[list[list[Any]]] = [[] for _ in range(BUCKETS_AMOUNT)]

    def _bucket(self, key: str) -> list[list[Any]]:
        return self._buckets[bucket_index(key)]

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: str) -> Any:
        """Return the value for ``key``, or None when it is absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return None

    def delete(self, key: str) -> None:
        """Remove ``key`` if present; absent keys are ignored."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                return

    def values(self) -> Iterator[Any]:
        """Yield the stored values, bucket by bucket, in insertion order within a bucket."""
        for bucket in self._buckets:
            for _, value in bucket:
                yield value

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))