"""System parameters, file-control flags, stat records and RISC-V Sv39 layout helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

U64 = (1 << 64) - 1

# System limits.
NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 1
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 2000
MAXPATH = 128
USERSTACK = 2


class OpenFlag(enum.IntFlag):
    """Flags accepted by open()."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200
    TRUNC = 0x400


class FileType(enum.IntEnum):
    """Kinds of inode reported by stat."""

    DIR = 1
    FILE = 2
    DEVICE = 3


@dataclass
class Stat:
    """What fstat reports about an open file."""

    dev: int = 0
    ino: int = 0
    type: FileType = FileType.FILE
    nlink: int = 0
    size: int = 0

    def __post_init__(self) -> None:
        self.type = FileType(self.type)

    @property
    def is_dir(self) -> bool:
        return self.type is FileType.DIR


# Paging.
PGSIZE = 4096
PGSHIFT = 12

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3
PTE_U = 1 << 4

PXMASK = 0x1FF
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)
SATP_SV39 = 8 << 60

# Status and interrupt-enable bits.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1
MIE_STIE = 1 << 5

# Physical memory layout.
UART0 = 0x10000000
UART0_IRQ = 10
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1
PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000
KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024
TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE


def pg_round_up(sz: int) -> int:
    """Round a size up to the next page boundary."""
    return (sz + PGSIZE - 1) & ~(PGSIZE - 1) & U64


def pg_round_down(a: int) -> int:
    """Round an address down to its page boundary."""
    return a & ~(PGSIZE - 1) & U64


def pa2pte(pa: int) -> int:
    """Place a physical address where a page-table entry keeps it."""
    return ((pa & U64) >> 12) << 10


def pte2pa(pte: int) -> int:
    """Extract the physical address held by a page-table entry."""
    return ((pte >> 10) << 12) & U64


def pte_flags(pte: int) -> int:
    """The low ten flag bits of a page-table entry."""
    return pte & 0x3FF


def px(level: int, va: int) -> int:
    """The 9-bit page-table index of a virtual address at the given level."""
    return ((va & U64) >> (PGSHIFT + 9 * level)) & PXMASK


def kstack(p: int) -> int:
    """Virtual address of the kernel stack for process slot p."""
    return TRAMPOLINE - (p + 1) * 2 * PGSIZE


def make_satp(pagetable: int) -> int:
    """The satp value selecting Sv39 translation with the given root table."""
    return SATP_SV39 | ((pagetable & U64) >> 12)


def plic_senable(hart: int) -> int:
    return PLIC + 0x2080 + hart * 0x100


def plic_spriority(hart: int) -> int:
    return PLIC + 0x201000 + hart * 0x2000


def plic_sclaim(hart: int) -> int:
    return PLIC + 0x201004 + hart * 0x2000