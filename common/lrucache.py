import collections
import threading
import typing

K = typing.TypeVar('K')  # Key type
V = typing.TypeVar('V')  # Value type
T = typing.TypeVar('T')  # Default value type

# All access goes through a lock so a single cache can be shared by the
# rendering workers. The create callback passed to getOrCreate is called
# outside the lock, if two threads race to create the same key the first
# value stored wins and both callers get that value back.
class LRUCache(typing.Generic[K, V]):
    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f'LRU cache capacity must be at least 1 ({capacity})')
        self._capacity = capacity
        self._mapping: typing.OrderedDict[K, V] = collections.OrderedDict()
        self._lock = threading.RLock()

    def capacity(self) -> int:
        return self._capacity

    def put(
            self,
            key: K,
            value: V
            ) -> None:
        with self._lock:
            self._put(key=key, value=value)

    def get(self, key: K, default: T = None) -> typing.Union[V, T]:
        with self._lock:
            if key not in self._mapping:
                return default
            self._mapping.move_to_end(key)
            return self._mapping[key]

    def getOrCreate(
            self,
            key: K,
            createCb: typing.Callable[[], V]
            ) -> V:
        with self._lock:
            if key in self._mapping:
                self._mapping.move_to_end(key)
                return self._mapping[key]

        value = createCb()

        with self._lock:
            if key in self._mapping:
                self._mapping.move_to_end(key)
                return self._mapping[key]
            self._put(key=key, value=value)
            return value

    def remove(self, key: K) -> None:
        with self._lock:
            if key not in self._mapping:
                raise KeyError(f'Key "{key}" is not in the cache')
            del self._mapping[key]

    def clear(self) -> None:
        with self._lock:
            self._mapping.clear()

    def isFull(self) -> bool:
        with self._lock:
            return len(self._mapping) >= self._capacity

    def ensureCapacity(self, capacity: int) -> None:
        with self._lock:
            if capacity > self._capacity:
                self._capacity = capacity

    def __contains__(self, key: K) -> bool:
        with self._lock:
            return key in self._mapping

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __getitem__(self, key: K) -> V:
        with self._lock:
            if key not in self._mapping:
                raise KeyError(f'Key "{key}" is not in the cache')
            self._mapping.move_to_end(key)
            return self._mapping[key]

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._mapping)

    def __repr__(self) -> str:
        with self._lock:
            return repr(self._mapping)

    def _put(self, key: K, value: V) -> None:
        if key in self._mapping:
            self._mapping.move_to_end(key)
        elif len(self._mapping) >= self._capacity:
            self._mapping.popitem(last=False)
        self._mapping[key] = value
