import pytest

from xvtools.elf import (
    ELF_MAGIC,
    ELF_PROG_FLAG_EXEC,
    ELF_PROG_FLAG_READ,
    ELF_PROG_LOAD,
    ElfError,
    ElfHeader,
    ProgramHeader,
)


def test_magic_bytes_on_wire():
    assert ElfHeader().to_bytes()[:4] == b"\x7fELF"


def test_header_size():
    assert ElfHeader.SIZE == 64
    assert len(ElfHeader().to_bytes()) == ElfHeader.SIZE


def test_header_round_trip():
    hdr = ElfHeader(
        elf=b"\x02\x01\x01" + bytes(9),
        type=2,
        machine=243,
        version=1,
        entry=0x1000,
        phoff=64,
        shoff=9999,
        ehsize=64,
        phentsize=56,
        phnum=3,
        shentsize=64,
        shnum=10,
        shstrndx=9,
    )
    again = ElfHeader.from_bytes(hdr.to_bytes())
    assert again == hdr
    assert again.is_valid()


def test_header_from_longer_data():
    hdr = ElfHeader(entry=42)
    again = ElfHeader.from_bytes(hdr.to_bytes() + b"trailing")
    assert again.entry == 42


def test_invalid_magic():
    hdr = ElfHeader.from_bytes(b"\x00" * 64)
    assert not hdr.is_valid()


def test_short_data_raises():
    with pytest.raises(ElfError):
        ElfHeader.from_bytes(b"\x7fELF")
    with pytest.raises(ElfError):
        ProgramHeader.from_bytes(bytes(10))


def test_bad_identification_length():
    with pytest.raises(ElfError):
        ElfHeader(elf=b"abc")


def test_out_of_range_field_raises():
    with pytest.raises(ElfError):
        ElfHeader(type=1 << 20).to_bytes()


def test_program_header_round_trip():
    ph = ProgramHeader(
        type=ELF_PROG_LOAD,
        flags=ELF_PROG_FLAG_READ | ELF_PROG_FLAG_EXEC,
        off=0x1000,
        vaddr=0,
        paddr=0,
        filesz=1234,
        memsz=2048,
        align=4096,
    )
    data = ph.to_bytes()
    assert len(data) == ProgramHeader.SIZE
    again = ProgramHeader.from_bytes(data)
    assert again == ph
    assert again.loadable
    assert not ProgramHeader(type=0).loadable


def test_magic_constant_little_endian():
    assert ELF_MAGIC.to_bytes(4, "little") == b"\x7fELF"