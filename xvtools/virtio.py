"""Virtio MMIO register offsets and virtqueue structures for block devices."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

# MMIO control registers.
VIRTIO_MMIO_MAGIC_VALUE = 0x000
VIRTIO_MMIO_VERSION = 0x004
VIRTIO_MMIO_DEVICE_ID = 0x008
VIRTIO_MMIO_VENDOR_ID = 0x00C
VIRTIO_MMIO_DEVICE_FEATURES = 0x010
VIRTIO_MMIO_DRIVER_FEATURES = 0x020
VIRTIO_MMIO_QUEUE_SEL = 0x030
VIRTIO_MMIO_QUEUE_NUM_MAX = 0x034
VIRTIO_MMIO_QUEUE_NUM = 0x038
VIRTIO_MMIO_QUEUE_READY = 0x044
VIRTIO_MMIO_QUEUE_NOTIFY = 0x050
VIRTIO_MMIO_INTERRUPT_STATUS = 0x060
VIRTIO_MMIO_INTERRUPT_ACK = 0x064
VIRTIO_MMIO_STATUS = 0x070
VIRTIO_MMIO_QUEUE_DESC_LOW = 0x080
VIRTIO_MMIO_QUEUE_DESC_HIGH = 0x084
VIRTIO_MMIO_DRIVER_DESC_LOW = 0x090
VIRTIO_MMIO_DRIVER_DESC_HIGH = 0x094
VIRTIO_MMIO_DEVICE_DESC_LOW = 0x0A0
VIRTIO_MMIO_DEVICE_DESC_HIGH = 0x0A4

# Status register bits.
VIRTIO_CONFIG_S_ACKNOWLEDGE = 1
VIRTIO_CONFIG_S_DRIVER = 2
VIRTIO_CONFIG_S_DRIVER_OK = 4
VIRTIO_CONFIG_S_FEATURES_OK = 8

# Device feature bits.
VIRTIO_BLK_F_RO = 5
VIRTIO_BLK_F_SCSI = 7
VIRTIO_BLK_F_CONFIG_WCE = 11
VIRTIO_BLK_F_MQ = 12
VIRTIO_F_ANY_LAYOUT = 27
VIRTIO_RING_F_INDIRECT_DESC = 28
VIRTIO_RING_F_EVENT_IDX = 29

NUM = 8

VRING_DESC_F_NEXT = 1
VRING_DESC_F_WRITE = 2

VIRTIO_BLK_T_IN = 0
VIRTIO_BLK_T_OUT = 1


def _unpack(fmt: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < fmt.size:
        raise ValueError(f"need {fmt.size} bytes for {what}, got {len(data)}")
    return fmt.unpack_from(data)


def _pack(fmt: struct.Struct, *values: int) -> bytes:
    try:
        return fmt.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _check_ring(ring: tuple, what: str) -> tuple:
    ring = tuple(ring)
    if len(ring) != NUM:
        raise ValueError(f"{what} ring must have {NUM} entries, got {len(ring)}")
    return ring


@dataclass
class VirtqDesc:
    """A single virtqueue descriptor."""

    addr: int = 0
    len: int = 0
    flags: int = 0
    next: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<QIHH")
    SIZE: ClassVar[int] = _STRUCT.size

    def to_bytes(self) -> bytes:
        return _pack(self._STRUCT, self.addr, self.len, self.flags, self.next)

    @classmethod
    def from_bytes(cls, data: bytes) -> VirtqDesc:
        return cls(*_unpack(cls._STRUCT, data, "a descriptor"))


@dataclass
class VirtqAvail:
    """The available ring written by the driver."""

    flags: int = 0
    idx: int = 0
    ring: tuple = field(default_factory=lambda: (0,) * NUM)
    unused: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct(f"<HH{NUM}HH")
    SIZE: ClassVar[int] = _STRUCT.size

    def __post_init__(self) -> None:
        self.ring = _check_ring(self.ring, "avail")

    def to_bytes(self) -> bytes:
        return _pack(self._STRUCT, self.flags, self.idx, *self.ring, self.unused)

    @classmethod
    def from_bytes(cls, data: bytes) -> VirtqAvail:
        values = _unpack(cls._STRUCT, data, "the avail ring")
        return cls(values[0], values[1], values[2:2 + NUM], values[2 + NUM])


@dataclass
class VirtqUsedElem:
    """One completed descriptor chain reported by the device."""

    id: int = 0
    len: int = 0


@dataclass
class VirtqUsed:
    """The used ring written by the device."""

    flags: int = 0
    idx: int = 0
    ring: tuple = field(default_factory=lambda: tuple(VirtqUsedElem() for _ in range(NUM)))

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<HH" + "II" * NUM)
    SIZE: ClassVar[int] = _STRUCT.size

    def __post_init__(self) -> None:
        self.ring = _check_ring(self.ring, "used")

    def to_bytes(self) -> bytes:
        pairs = [v for elem in self.ring for v in (elem.id, elem.len)]
        return _pack(self._STRUCT, self.flags, self.idx, *pairs)

    @classmethod
    def from_bytes(cls, data: bytes) -> VirtqUsed:
        values = _unpack(cls._STRUCT, data, "the used ring")
        rest = values[2:]
        ring = tuple(VirtqUsedElem(i, n) for i, n in zip(rest[0::2], rest[1::2]))
        return cls(values[0], values[1], ring)


@dataclass
class BlkRequest:
    """The first descriptor of a block-device request."""

    type: int = VIRTIO_BLK_T_IN
    reserved: int = 0
    sector: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIQ")
    SIZE: ClassVar[int] = _STRUCT.size

    def to_bytes(self) -> bytes:
        return _pack(self._STRUCT, self.type, self.reserved, self.sector)

    @classmethod
    def from_bytes(cls, data: bytes) -> BlkRequest:
        return cls(*_unpack(cls._STRUCT, data, "a block request"))