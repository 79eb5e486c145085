from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from hsdemangle.error import BufferAllocationError, BufferReleasedError

Allocator = Callable[[int], bytearray]


class BufferPolicy(BaseModel):
    """
    Growth tunables for OutputBuffer.
    Most symbol names are short, so the initial capacity is small.
    """

    model_config = ConfigDict(frozen=True)

    initial_capacity: PositiveInt = 20
    growth_factor: float = Field(default=1.5, gt=1.0)


DEFAULT_POLICY = BufferPolicy()


class OutputBuffer:
    """
    Append-only byte accumulator with an explicit capacity.

    Appends are amortized O(1): whenever a write does not fit, storage grows to
    max(required length, capacity * growth_factor) and existing bytes are copied
    over. Storage comes from `allocator`, a MemoryError raised by it surfaces as
    BufferAllocationError.
    """

    def __init__(
        self,
        policy: Optional[BufferPolicy] = None,
        allocator: Allocator = bytearray,
    ) -> None:
        self._policy: BufferPolicy = policy or DEFAULT_POLICY
        self._allocate: Allocator = allocator
        self._length: int = 0
        self._capacity: int = self._policy.initial_capacity
        self._data: Optional[bytearray] = self._allocate_storage(self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        return self._length

    @property
    def released(self) -> bool:
        return self._data is None

    def reserve(self, amount: int) -> None:
        storage = self._storage()
        required = self._length + amount
        if required <= self._capacity:
            return
        capacity = max(required, int(self._capacity * self._policy.growth_factor))
        grown = self._allocate_storage(capacity)
        grown[: self._length] = storage[: self._length]
        self._data = grown
        self._capacity = capacity

    def append(self, byte: int) -> None:
        if self._length == self._capacity:
            self.reserve(1)
        self._storage()[self._length] = byte
        self._length += 1

    def append_sequence(self, data: bytes) -> None:
        end = self._length + len(data)
        self.reserve(len(data))
        self._storage()[self._length : end] = data
        self._length = end

    def finalize(self) -> bytes:
        """
        Copies the written bytes into exactly sized storage and releases the
        working storage. The buffer cannot be used afterwards.
        """
        storage = self._storage()
        try:
            exact = self._allocate_storage(self._length)
        finally:
            # released whether or not the shrink succeeded
            self._data = None
        exact[:] = storage[: self._length]
        return bytes(exact)

    def release(self) -> None:
        self._data = None

    def _storage(self) -> bytearray:
        if self._data is None:
            raise BufferReleasedError()
        return self._data

    def _allocate_storage(self, size: int) -> bytearray:
        try:
            return self._allocate(size)
        except (MemoryError, OverflowError) as e:
            raise BufferAllocationError(size) from e
