from typing import Callable, List

import pytest


class CountingAllocator:
    """Allocator that records every request and fails the `fail_at`-th one."""

    def __init__(self, fail_at: int | None = None) -> None:
        self.fail_at = fail_at
        self.requests: List[int] = []

    def __call__(self, size: int) -> bytearray:
        self.requests.append(size)
        if self.fail_at is not None and len(self.requests) == self.fail_at:
            raise MemoryError(f"injected failure allocating {size} bytes")
        return bytearray(size)


@pytest.fixture
def counting_allocator() -> Callable[..., CountingAllocator]:
    return CountingAllocator
