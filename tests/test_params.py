import pytest

from xvtools.params import (
    KERNBASE,
    MAXVA,
    PGSIZE,
    PLIC,
    PTE_R,
    PTE_V,
    PTE_W,
    TRAMPOLINE,
    TRAPFRAME,
    FileType,
    OpenFlag,
    Stat,
    kstack,
    make_satp,
    pa2pte,
    pg_round_down,
    pg_round_up,
    plic_sclaim,
    plic_senable,
    plic_spriority,
    pte2pa,
    pte_flags,
    px,
)


def test_layout_addresses():
    assert MAXVA == 0x4000000000
    assert TRAMPOLINE == 0x3FFFFFF000
    assert TRAPFRAME == 0x3FFFFFE000
    assert pg_round_down(TRAMPOLINE + 0x123) == TRAMPOLINE
    assert pg_round_up(TRAPFRAME + 1) == TRAMPOLINE
    assert px(2, TRAMPOLINE) == 255
    assert px(0, TRAPFRAME) == 510


def test_open_flag_values():
    combined = OpenFlag(0x001 | 0x200 | 0x400)
    assert combined == OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC
    assert OpenFlag(0x200) == OpenFlag.CREATE
    assert OpenFlag(0x400) == OpenFlag.TRUNC
    assert OpenFlag.CREATE in combined
    assert OpenFlag.RDWR not in combined


@pytest.mark.parametrize("sz", [0, 1, PGSIZE - 1, PGSIZE, PGSIZE + 1, 123456])
def test_round_up_invariants(sz):
    r = pg_round_up(sz)
    assert r % PGSIZE == 0
    assert sz <= r < sz + PGSIZE


@pytest.mark.parametrize("a", [0, 1, PGSIZE - 1, PGSIZE, PGSIZE + 1, KERNBASE + 77])
def test_round_down_invariants(a):
    r = pg_round_down(a)
    assert r % PGSIZE == 0
    assert r <= a < r + PGSIZE


def test_round_up_exact_pages():
    assert pg_round_up(1) == PGSIZE
    assert pg_round_down(PGSIZE + 1) == PGSIZE


@pytest.mark.parametrize("pa", [KERNBASE, KERNBASE + 5 * PGSIZE, 0])
def test_pte_round_trip(pa):
    pte = pa2pte(pa) | PTE_V | PTE_R | PTE_W
    assert pte2pa(pte) == pa
    assert pte_flags(pte) == PTE_V | PTE_R | PTE_W


@pytest.mark.parametrize("va", [0, 0x1234, TRAMPOLINE + 0x123, MAXVA - 1])
def test_px_reconstructs_address(va):
    rebuilt = (px(2, va) << 30) | (px(1, va) << 21) | (px(0, va) << 12) | (va & (PGSIZE - 1))
    assert rebuilt == va
    for level in range(3):
        assert 0 <= px(level, va) < 512


def test_kstack_spacing_and_guard():
    assert kstack(0) < TRAMPOLINE
    assert kstack(0) - kstack(1) == 2 * PGSIZE
    assert kstack(3) % PGSIZE == 0


def test_make_satp_mode_and_ppn():
    satp = make_satp(KERNBASE)
    assert satp >> 60 == 8
    assert (satp & ((1 << 44) - 1)) << 12 == KERNBASE


def test_plic_registers_per_hart():
    assert plic_senable(0) == PLIC + 0x2080
    assert plic_spriority(1) - plic_spriority(0) == 0x2000
    assert plic_sclaim(2) - plic_spriority(2) == 4


def test_stat_type_coerced_and_validated():
    st = Stat(dev=1, ino=2, type=1, nlink=1, size=0)
    assert st.type is FileType.DIR
    assert st.is_dir
    assert not Stat(type=FileType.FILE).is_dir
    with pytest.raises(ValueError):
        Stat(type=9)