"""A first-fit memory allocator over a simulated pool of bytes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 100 * 1024 * 1024
HEADER_SIZE = 24
ALIGNMENT = 8


def _align(size: int) -> int:
    return (size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)


@dataclass
class Block:
    """A block in the pool: header offset, usable size and whether it is free."""

    address: int
    size: int
    is_free: bool

    @property
    def payload(self) -> int:
        """Offset of the first usable byte after the header."""
        return self.address + HEADER_SIZE

    @property
    def end(self) -> int:
        """Offset just past the block's usable bytes."""
        return self.payload + self.size


class MemoryPool:
    """A pool of ``size`` bytes handed out by first fit, each block behind a header."""

    def __init__(self, size: int = DEFAULT_POOL_SIZE) -> None:
        if size <= HEADER_SIZE:
            raise ValueError(f"pool must be larger than the {HEADER_SIZE}-byte header")
        self.size = size
        self._blocks = [Block(0, size - HEADER_SIZE, True)]

    def alloc(self, size: int) -> int:
        """Reserve ``size`` bytes (rounded up to 8) and return the payload offset.

        Raises ``ValueError`` for a zero, negative or oversized request and
        ``MemoryError`` when no free block is large enough.
        """
        if size <= 0 or size > self.size - HEADER_SIZE:
            raise ValueError(f"invalid allocation size {size}")
        size = _align(size)

        for index, block in enumerate(self._blocks):
            if block.is_free and size <= block.size:
                break
        else:
            raise MemoryError(f"no free block of {size} bytes")

        logger.debug("Free block found at %#x, size %d", block.address, block.size)
        if size + HEADER_SIZE < block.size:
            remainder = Block(block.payload + size, block.size - size - HEADER_SIZE, True)
            logger.debug(
                "Block split: %#x size= %d into newSize %d | newBlock %#x newSize %d",
                block.address, block.size, size, remainder.address, remainder.size,
            )
            block.size = size
            self._blocks.insert(index + 1, remainder)
        block.is_free = False
        return block.payload

    def free(self, address: int | None) -> None:
        """Release the block whose payload starts at ``address``; ``None`` is ignored.

        Adjacent free blocks are merged. Raises ``ValueError`` for an address
        that is not an allocated block.
        """
        if address is None:
            return
        for block in self._blocks:
            if block.payload == address:
                break
        else:
            raise ValueError(f"no block at address {address:#x}")
        if block.is_free:
            raise ValueError(f"block at address {address:#x} is already free")
        block.is_free = True
        self._merge()

    def _merge(self) -> None:
        merged: list[Block] = []
        for block in self._blocks:
            if merged and merged[-1].is_free and block.is_free:
                merged[-1].size += block.size + HEADER_SIZE
            else:
                merged.append(block)
        self._blocks = merged

    def blocks(self) -> list[Block]:
        """Return copies of all blocks in address order."""
        return [replace(block) for block in self._blocks]