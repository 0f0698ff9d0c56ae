"""A first-fit free-list heap allocator over a simulated break-grown heap."""

from __future__ import annotations

from .params import KERNBASE, PHYSTOP

HEADER_SIZE = 16
MIN_UNITS = 4096

_BASE = 0


class Allocator:
    """Circular free-list allocator kept in address order, with coalescing.

    Addresses are byte offsets into a simulated heap. Each block starts
    with a one-unit header; units are HEADER_SIZE bytes. The heap grows
    in steps of at least MIN_UNITS units and never beyond heap_limit bytes.
    """

    def __init__(self, heap_limit: int = PHYSTOP - KERNBASE) -> None:
        if heap_limit < 0:
            raise ValueError("heap_limit must not be negative")
        self.heap_limit = heap_limit
        # header unit -> [next free header unit, size in units]
        self._headers: dict[int, list[int]] = {}
        self._freep: int | None = None
        self._brk = 1
        self._allocated: set[int] = set()

    @property
    def heap_size(self) -> int:
        """Bytes obtained for the heap so far."""
        return (self._brk - 1) * HEADER_SIZE

    def malloc(self, nbytes: int) -> int:
        """Allocate nbytes and return the address of the usable memory."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        headers = self._headers
        if self._freep is None:
            headers[_BASE] = [_BASE, 0]
            self._freep = _BASE
        prevp = self._freep
        p = headers[prevp][0]
        while True:
            hp = headers[p]
            if hp[1] >= nunits:
                if hp[1] == nunits:
                    headers[prevp][0] = hp[0]
                else:
                    hp[1] -= nunits
                    p += hp[1]
                    headers[p] = [0, nunits]
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                grown = self._morecore(nunits)
                if grown is None:
                    raise MemoryError(f"cannot allocate {nbytes} bytes")
                p = grown
            prevp, p = p, headers[p][0]

    def free(self, addr: int) -> None:
        """Return a block obtained from malloc to the free list."""
        if addr % HEADER_SIZE:
            raise ValueError(f"address {addr} was not returned by malloc")
        bp = addr // HEADER_SIZE - 1
        if bp not in self._allocated:
            raise ValueError(f"address {addr} is not an allocated block")
        self._allocated.remove(bp)
        self._release(bp)

    def free_blocks(self) -> list[tuple[int, int]]:
        """Free blocks in address order as (header address, size in bytes)."""
        if self._freep is None:
            return []
        blocks = []
        p = self._headers[_BASE][0]
        while p != _BASE:
            blocks.append((p * HEADER_SIZE, self._headers[p][1] * HEADER_SIZE))
            p = self._headers[p][0]
        return blocks

    def _morecore(self, nu: int) -> int | None:
        nu = max(nu, MIN_UNITS)
        if (self._brk - 1 + nu) * HEADER_SIZE > self.heap_limit:
            return None
        hp = self._brk
        self._brk += nu
        self._headers[hp] = [0, nu]
        self._release(hp)
        return self._freep

    def _release(self, bp: int) -> None:
        h = self._headers
        p = self._freep
        while not (p < bp < h[p][0]):
            if p >= h[p][0] and (bp > p or bp < h[p][0]):
                break
            p = h[p][0]
        nxt = h[p][0]
        if bp + h[bp][1] == nxt:
            h[bp][1] += h[nxt][1]
            h[bp][0] = h[nxt][0]
            del h[nxt]
        else:
            h[bp][0] = nxt
        if p + h[p][1] == bp:
            h[p][1] += h[bp][1]
            h[p][0] = h[bp][0]
            del h[bp]
        else:
            h[p][0] = bp
        self._freep = p