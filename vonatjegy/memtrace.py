"""Allocation tracing with guard bytes around every block.

A :class:`MemoryTracer` hands out :class:`Block` objects, remembers who
allocated them, checks on release that the block is known, that it is
released with a matching function and that the guard bytes ("canaries")
around it are intact, and reports blocks that were never released.
"""

import enum
import sys
import time
from dataclasses import dataclass
from typing import Optional

CANARY_BEFORE = ord("k")
CANARY_AFTER = ord("K")
DEFAULT_CANARY_LEN = 64
_FREED_FILL = ord("f")


class Allocator(enum.IntEnum):
    """The functions that allocate or release a block."""

    MALLOC = 0
    CALLOC = 1
    REALLOC = 2
    FREE = 3
    NEW = 4
    DELETE = 5
    NEW_ARRAY = 6
    DELETE_ARRAY = 7

    @property
    def pretty(self):
        """The name the function is reported under."""
        return _PRETTY[self]

    @property
    def is_c_style(self):
        """True for the malloc family."""
        return self <= Allocator.FREE

    def releases(self, allocation):
        """Tell whether this function may release a block made by ``allocation``."""
        if allocation.is_c_style and self.is_c_style:
            return True
        return self == allocation + 1


_PRETTY = {
    Allocator.MALLOC: "malloc(",
    Allocator.CALLOC: "calloc(",
    Allocator.REALLOC: "realloc(",
    Allocator.FREE: "free(",
    Allocator.NEW: "new",
    Allocator.DELETE: "delete",
    Allocator.NEW_ARRAY: "new[]",
    Allocator.DELETE_ARRAY: "delete[]",
}

_ALLOCATING = frozenset(
    {Allocator.MALLOC, Allocator.CALLOC, Allocator.REALLOC, Allocator.NEW, Allocator.NEW_ARRAY}
)
_RELEASING = frozenset(
    {Allocator.FREE, Allocator.REALLOC, Allocator.DELETE, Allocator.DELETE_ARRAY}
)


def basename(path):
    """Return the last component of a path with either kind of separator."""
    return path.rsplit("/", 1)[-1].rsplit("\\", 1)[-1]


def hexdump(data, canary_len=0):
    """Return a hex and character dump of ``data``, 16 bytes per line.

    Lines that lie wholly inside the user region (not in the first or last
    ``canary_len`` bytes) are marked with ``*``.
    """
    data = bytes(data)
    size = len(data)
    lines = []
    for offset in range(0, size, 16):
        inside = not (offset < canary_len or offset >= size - canary_len)
        chunk = data[offset:offset + 16]
        hex_part = []
        for position in range(16):
            if position == 8:
                hex_part.append(" ")
            hex_part.append(f"{chunk[position]:02x} " if position < len(chunk) else "   ")
        text = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        lines.append(
            f"{offset:04x}:{'*' if inside else ' '} {''.join(hex_part)} {text.ljust(16)}\n"
        )
    return "".join(lines)


@dataclass(frozen=True)
class Call:
    """Where and how a block was allocated or released."""

    allocator: Allocator
    line: int = 0
    file: Optional[str] = None
    text: Optional[str] = None

    def __str__(self):
        closing = ")" if self.allocator.is_c_style else ""
        text = "?" if self.text is None else self.text
        file = basename(self.file) if self.file else "?"
        return f"{self.allocator.pretty}{text}{closing} @ {file}:{self.line or 0}"


@dataclass(eq=False)
class Block:
    """A traced block: the user bytes with guard bytes on both sides."""

    buffer: bytearray
    size: int
    call: Call
    canary_len: int

    @property
    def address(self):
        """An identifier for the user region of the block."""
        return id(self.buffer) + self.canary_len

    @property
    def data(self):
        """A writable view of the user bytes."""
        return memoryview(self.buffer)[self.canary_len:self.canary_len + self.size]

    def _canary_status(self):
        before = self.buffer[:self.canary_len]
        if any(b != CANARY_BEFORE for b in before):
            return -1
        after = self.buffer[self.canary_len + self.size:]
        if any(b != CANARY_AFTER for b in after):
            return 1
        return 0


class TraceError(RuntimeError):
    """Raised when a block is released wrongly or its guard bytes are damaged."""

    def __init__(self, message, block=None, allocation=None, release=None, size=None):
        self.message = message
        self.block = block
        self.allocation = allocation
        self.release = release
        super().__init__(self._report(size))

    def _report(self, size):
        parts = [f"{self.message}\n"]
        block = self.block
        if block is not None:
            shown = block.size if size is None else size
            pointer = f"\tPointer:\t0x{block.address:x}"
            if shown:
                pointer += f" ({shown} byte)"
            parts.append(pointer + "\n")
        if self.allocation is not None:
            parts.append(f"\tFoglalas:\t{self.allocation}\n")
        if self.release is not None:
            parts.append(f"\tFelszabaditas:\t{self.release}\n")
        if block is not None:
            shown = block.size if size is None else size
            cl = block.canary_len
            if cl > 0:
                parts.append(f"Dump (addr: 0x{block.address:x} kanari hossz: {cl}):\n")
            else:
                parts.append(f"Dump: (addr: 0x{block.address:x}) \n")
            region = block.buffer[:cl] + block.buffer[cl:cl + shown] + block.buffer[
                cl + block.size:cl + block.size + cl
            ]
            parts.append(hexdump(region, cl))
        return "".join(parts)


class MemoryTracer:
    """Keeps track of live blocks and validates every release.

    Reports from :meth:`check` go to ``stream`` (standard error by default).
    """

    def __init__(self, canary_len=DEFAULT_CANARY_LEN):
        if canary_len < 0:
            raise ValueError("canary length must not be negative")
        self.canary_len = canary_len
        self.fill = int(time.time()) & 0xFF
        self.stream = sys.stderr
        self._registry = {}
        self._allocated = 0
        self._dying = False

    def _new_block(self, size, call, fill):
        cl = self.canary_len
        buffer = bytearray([CANARY_BEFORE]) * cl + bytearray([fill]) * size
        buffer += bytearray([CANARY_AFTER]) * cl
        block = Block(buffer, size, call, cl)
        self._registry[block.address] = block
        self._allocated += 1
        return block

    def allocate(self, size, allocator=Allocator.MALLOC, line=0, file=None):
        """Allocate a block of ``size`` bytes; calloc blocks are zeroed."""
        allocator = Allocator(allocator)
        if allocator not in _ALLOCATING:
            raise ValueError(f"{allocator.name} does not allocate")
        if size < 0:
            raise ValueError("size must not be negative")
        text = str(size) if allocator.is_c_style else ""
        fill = 0 if allocator == Allocator.CALLOC else self.fill
        return self._new_block(size, Call(allocator, line, file, text), fill)

    def release(self, block, allocator=Allocator.FREE, line=0, file=None):
        """Release a block, raising :class:`TraceError` on any misuse.

        Releasing ``None`` does nothing.  A released block's bytes are
        overwritten with ``f`` and its last byte with zero.
        """
        allocator = Allocator(allocator)
        if allocator not in _RELEASING:
            raise ValueError(f"{allocator.name} does not release")
        if block is None:
            return
        text = "" if allocator in (Allocator.DELETE, Allocator.DELETE_ARRAY) else None
        call = Call(allocator, line, file, text)
        if self._registry.get(block.address) is not block:
            self._dying = True
            raise TraceError(
                "Nem letezo, vagy mar felszabaditott adat felszabaditasa:",
                block,
                release=call,
                size=0,
            )
        del self._registry[block.address]
        self._allocated -= 1
        if not allocator.releases(block.call.allocator):
            self._dying = True
            raise TraceError("Hibas felszabaditas:", block, block.call, call)
        status = block._canary_status()
        if status < 0:
            self._dying = True
            raise TraceError("Blokk elott serult a memoria:", block, block.call, call)
        if status > 0:
            self._dying = True
            raise TraceError("Blokk utan serult a memoria", block, block.call, call)
        data = block.data
        if block.size:
            data[:] = bytes([_FREED_FILL]) * block.size
            data[-1] = 0

    def reallocate(self, block, size, line=0, file=None):
        """Return a new block of ``size`` bytes holding the old block's contents."""
        if size < 0:
            raise ValueError("size must not be negative")
        new = self._new_block(size, Call(Allocator.REALLOC, line, file, str(size)), self.fill)
        if block is not None:
            keep = min(block.size, size)
            new.data[:keep] = block.data[:keep]
            self.release(block, Allocator.REALLOC, line, file)
        return new

    def allocated_blocks(self):
        """Return the number of blocks allocated and not yet released."""
        return self._allocated

    def check(self):
        """Report leaked blocks.

        Returns 0 when all is well, 1 when blocks leaked (they are reported
        and forgotten) and 2 after a release error.
        """
        if self._dying:
            return 2
        if self._registry:
            lines = ["Szivargas:\n"]
            for block in self._registry.values():
                lines.append(f"\t0x{block.address:x}{block.size:5d} byte {block.call}\n")
            self.stream.write("".join(lines))
            self._registry.clear()
            return 1
        return 0