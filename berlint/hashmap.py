"""An open-addressing hash map with fixed-size byte keys and values."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

MAX_LOAD = 0.75
INITIAL_CAPACITY = 8
MAX_CAPACITY = 2147483647

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619

BytesLike = Union[bytes, bytearray, str]


class _Tombstone:
    """Marks a slot whose entry was removed."""

    def __repr__(self) -> str:
        return "<tombstone>"


_TOMBSTONE = _Tombstone()

_Entry = Tuple[bytes, bytes]
_Slot = Union[None, _Tombstone, _Entry]


def fnv1a_hash(data: bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``data``."""
    value = _FNV_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def grow_capacity(capacity: int) -> int:
    """Return the next table size: 8 at first, then doubling up to a limit."""
    if capacity == 0:
        return INITIAL_CAPACITY
    doubled = capacity * 2
    return MAX_CAPACITY if doubled > MAX_CAPACITY else doubled


def _fit(data: BytesLike, size: int, what: str) -> bytes:
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(raw) > size:
        raise ValueError(f"{what} is longer than {size} bytes")
    return raw.ljust(size, b"\0")


class HashMap:
    """Maps keys of ``key_size`` bytes to values of ``value_size`` bytes.

    Shorter keys and values are padded with zero bytes. A key made only of
    zero bytes cannot be stored. Removed entries keep counting towards
    ``len`` until the table next grows or is cleared.
    """

    def __init__(self, key_size: int, value_size: int) -> None:
        if key_size <= 0 or value_size <= 0:
            raise ValueError("key_size and value_size must be positive")
        self.key_size = key_size
        self.value_size = value_size
        self._slots: List[_Slot] = []
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _key(self, key: BytesLike) -> bytes:
        raw = _fit(key, self.key_size, "key")
        if not any(raw):
            raise ValueError("a key of only zero bytes cannot be stored")
        return raw

    def _probe(self, slots: List[_Slot], key: bytes) -> int:
        """Return the slot holding ``key`` or the slot where it would go."""
        capacity = len(slots)
        index = fnv1a_hash(key) % capacity
        tombstone: Optional[int] = None
        for _ in range(capacity):
            slot = slots[index]
            if slot is None:
                return index if tombstone is None else tombstone
            if slot is _TOMBSTONE:
                if tombstone is None:
                    tombstone = index
            elif slot[0] == key:
                return index
            index = (index + 1) % capacity
        if tombstone is None:
            raise RuntimeError("hash table has no free slot")
        return tombstone

    def _grow(self) -> None:
        new_slots: List[_Slot] = [None] * grow_capacity(self.capacity)
        self._count = 0
        for slot in self._slots:
            if slot is None or slot is _TOMBSTONE:
                continue
            new_slots[self._probe(new_slots, slot[0])] = slot
            self._count += 1
        self._slots = new_slots

    def insert(self, key: BytesLike, value: BytesLike) -> bool:
        """Store ``value`` under ``key``; return True if the key was new."""
        raw_key = self._key(key)
        raw_value = _fit(value, self.value_size, "value")
        if self._count >= self.capacity * MAX_LOAD:
            self._grow()
        index = self._probe(self._slots, raw_key)
        previous = self._slots[index]
        if previous is None:
            self._count += 1
        self._slots[index] = (raw_key, raw_value)
        return previous is None or previous is _TOMBSTONE

    def get(self, key: BytesLike) -> Optional[bytes]:
        """Return the value stored under ``key``, or None."""
        raw_key = self._key(key)
        if self.capacity == 0:
            return None
        slot = self._slots[self._probe(self._slots, raw_key)]
        if slot is None or slot is _TOMBSTONE:
            return None
        return slot[1]

    def remove(self, key: BytesLike) -> None:
        """Remove ``key`` if it is present."""
        raw_key = self._key(key)
        if self._count == 0 or self.capacity == 0:
            return
        index = self._probe(self._slots, raw_key)
        slot = self._slots[index]
        if slot is not None and slot is not _TOMBSTONE:
            self._slots[index] = _TOMBSTONE

    def clear(self) -> None:
        """Empty every slot while keeping the table size."""
        self._slots = [None] * self.capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def render(self, format_value: Callable[[bytes], str]) -> str:
        """Return ``{key: value, ...}`` in slot order, followed by a newline."""
        parts = []
        for slot in self._slots:
            if slot is None or slot is _TOMBSTONE:
                continue
            key = slot[0].split(b"\0", 1)[0].decode("utf-8", errors="replace")
            parts.append(f"{key}: {format_value(slot[1])}")
        return "{" + ", ".join(parts) + "}\n"