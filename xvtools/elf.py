"""ELF executable file and program headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

ELF_MAGIC = 0x464C457F

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4


class ElfError(ValueError):
    """Raised for malformed ELF header data."""


@dataclass
class ElfHeader:
    """The file header at the start of an ELF executable."""

    magic: int = ELF_MAGIC
    elf: bytes = field(default=bytes(12))
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<I12sHHIQQQIHHHHHH")
    SIZE: ClassVar[int] = _STRUCT.size

    def __post_init__(self) -> None:
        if len(self.elf) != 12:
            raise ElfError("elf identification must be 12 bytes")

    @classmethod
    def from_bytes(cls, data: bytes) -> ElfHeader:
        if len(data) < cls.SIZE:
            raise ElfError(f"need {cls.SIZE} bytes for an ELF header, got {len(data)}")
        return cls(*cls._STRUCT.unpack_from(data))

    def to_bytes(self) -> bytes:
        try:
            return self._STRUCT.pack(
                self.magic, self.elf, self.type, self.machine, self.version,
                self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
                self.phentsize, self.phnum, self.shentsize, self.shnum,
                self.shstrndx,
            )
        except struct.error as exc:
            raise ElfError(str(exc)) from exc

    def is_valid(self) -> bool:
        return self.magic == ELF_MAGIC


@dataclass
class ProgramHeader:
    """One program section header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIQQQQQQ")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> ProgramHeader:
        if len(data) < cls.SIZE:
            raise ElfError(f"need {cls.SIZE} bytes for a program header, got {len(data)}")
        return cls(*cls._STRUCT.unpack_from(data))

    def to_bytes(self) -> bytes:
        try:
            return self._STRUCT.pack(
                self.type, self.flags, self.off, self.vaddr,
                self.paddr, self.filesz, self.memsz, self.align,
            )
        except struct.error as exc:
            raise ElfError(str(exc)) from exc

    @property
    def loadable(self) -> bool:
        return self.type == ELF_PROG_LOAD