import math
from fractions import Fraction
from typing import Callable, List, Optional, Tuple

from fnv_hashmap.config import (
    INT32_MAX,
    INT32_MIN,
    MAX_LOAD_FACTOR,
    MIN_BUCKET_COUNT,
    MIN_LOAD_FACTOR,
    RESIZE_FACTOR,
)
from fnv_hashmap.errors import IndexOutOfRange
from fnv_hashmap.fnv import hash_key
from fnv_hashmap.logger.log_types import LogEvent
from fnv_hashmap.logger.logger import log_resize_event

Entry = Tuple[str, int]

# Exact ratio, so 10 buckets grow to 14 rather than ceil(14.000000000000002)
_RESIZE_RATIO = Fraction(str(RESIZE_FACTOR))


class HashMap:
    """Separate-chaining map from str keys to 32-bit signed ints.

    Keys land in bucket ``fnv1a_64(key) % bucket_count``. After every
    mutation the load factor is checked and the whole table is rehashed into
    a larger or smaller bucket list when it leaves
    [MIN_LOAD_FACTOR, MAX_LOAD_FACTOR].
    """

    def __init__(self, on_resize: Optional[Callable[[int, int], None]] = None) -> None:
        self.buckets: List[List[Entry]] = [[] for _ in range(MIN_BUCKET_COUNT)]
        self.entries_count = 0
        self._on_resize = on_resize

    def get(self, key: str) -> Optional[int]:
        _check_key(key)
        bucket = self.buckets[hash_key(key, len(self.buckets))]
        for k, v in bucket:
            if k == key:
                return v
        return None

    def set(self, key: str, value: int) -> None:
        _check_key(key)
        _check_value(value)
        self.delete(key)

        idx = hash_key(key, len(self.buckets))
        self.buckets[idx].append((key, value))
        self.entries_count += 1

        self._resize_if_necessary()

    def delete(self, key: str) -> None:
        _check_key(key)
        bucket = self.buckets[hash_key(key, len(self.buckets))]
        for i, (k, _) in enumerate(bucket):
            if k == key:
                del bucket[i]
                self.entries_count -= 1
                break
        self._resize_if_necessary()

    def get_bucket(self, index: int) -> List[Entry]:
        if index < 0 or index >= len(self.buckets):
            raise IndexOutOfRange(index, len(self.buckets))
        return list(self.buckets[index])

    def get_entries_count(self) -> int:
        return self.entries_count

    def get_buckets_count(self) -> int:
        return len(self.buckets)

    def load_factor(self) -> float:
        return self.entries_count / len(self.buckets)

    def longest_bucket(self) -> int:
        return max(len(bucket) for bucket in self.buckets)

    def _resize_if_necessary(self) -> None:
        load_factor = self.load_factor()
        bucket_count = len(self.buckets)

        if load_factor > MAX_LOAD_FACTOR:
            self._resize(math.ceil(bucket_count * _RESIZE_RATIO), LogEvent.TABLE_GROWN)
        elif load_factor < MIN_LOAD_FACTOR and bucket_count // 2 > MIN_BUCKET_COUNT:
            self._resize(math.ceil(bucket_count / _RESIZE_RATIO), LogEvent.TABLE_SHRUNK)

    def _resize(self, new_bucket_count: int, event: LogEvent = LogEvent.TABLE_RESIZED) -> None:
        old_bucket_count = len(self.buckets)
        new_buckets: List[List[Entry]] = [[] for _ in range(new_bucket_count)]
        for bucket in self.buckets:
            for key, value in bucket:
                new_buckets[hash_key(key, new_bucket_count)].append((key, value))
        self.buckets = new_buckets

        log_resize_event(event, old_bucket_count, new_bucket_count, self.entries_count)
        if self._on_resize:
            self._on_resize(old_bucket_count, new_bucket_count)

    def __len__(self) -> int:
        return self.entries_count

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __getitem__(self, key: str) -> int:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: int) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __repr__(self):
        return f"{type(self).__name__}<entries: {self.entries_count}, buckets: {len(self.buckets)}>"


def _check_key(key) -> None:
    if not isinstance(key, str):
        raise TypeError(f"key must be str, not {type(key).__name__}")


def _check_value(value) -> None:
    # bool is an int subclass but not a valid value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, not {type(value).__name__}")
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"value {value} outside 32-bit signed range")
