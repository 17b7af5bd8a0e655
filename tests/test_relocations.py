import pytest

from irlab.elf.relocations import (
    Aarch64Reloc,
    AmdgpuReloc,
    I386Reloc,
    X8664Reloc,
    r32_info,
    r32_sym,
    r32_type,
    r64_info,
    r64_sym,
    r64_type,
)


def test_source_fixed_values():
    assert X8664Reloc(4) is X8664Reloc.R_X86_64_PLT32
    assert I386Reloc(43) is I386Reloc.R_386_GOT32X
    assert AmdgpuReloc(13) is AmdgpuReloc.R_AMDGPU_RELATIVE64
    assert Aarch64Reloc(283) is Aarch64Reloc.R_AARCH64_CALL26
    assert X8664Reloc(251) is X8664Reloc.R_X86_64_GNU_VTENTRY


def test_aarch64_aliases_share_members():
    assert Aarch64Reloc.R_AARCH64_TLS_DTPMOD64 is Aarch64Reloc.R_AARCH64_TLS_DTPMOD
    assert Aarch64Reloc.R_AARCH64_TLS_TPREL64 is Aarch64Reloc.R_AARCH64_TLS_TPREL
    assert Aarch64Reloc(1029).name == "R_AARCH64_TLS_DTPREL"


@pytest.mark.parametrize(
    "sym, kind",
    [(0, 0), (1, I386Reloc.R_386_PC32), (0xFFFFFF, 0xFF), (1234, 7)],
)
def test_r32_round_trip(sym, kind):
    info = r32_info(sym, kind)
    assert r32_sym(info) == sym
    assert r32_type(info) == int(kind)
    assert 0 <= info <= 0xFFFFFFFF


@pytest.mark.parametrize(
    "sym, kind",
    [
        (0, 0),
        (5, X8664Reloc.R_X86_64_JUMP_SLOT),
        (0xFFFFFFFF, 0xFFFFFFFF),
        (42, Aarch64Reloc.R_AARCH64_TLSDESC),
    ],
)
def test_r64_round_trip(sym, kind):
    info = r64_info(sym, kind)
    assert r64_sym(info) == sym
    assert r64_type(info) == int(kind)
    assert 0 <= info < 1 << 64


def test_r32_type_keeps_only_low_byte():
    info = r32_info(3, 0x1FF)
    assert r32_type(info) == 0xFF
    assert r32_sym(info) == 3


def test_r64_type_keeps_only_low_word():
    info = r64_info(9, (1 << 32) + X8664Reloc.R_X86_64_64)
    assert r64_type(info) == X8664Reloc.R_X86_64_64
    assert r64_sym(info) == 9


def test_decoded_type_maps_to_enum():
    info = r64_info(17, X8664Reloc.R_X86_64_RELATIVE)
    assert X8664Reloc(r64_type(info)) is X8664Reloc.R_X86_64_RELATIVE


@pytest.mark.parametrize("sym", [-1, 1 << 24])
def test_r32_info_rejects_bad_symbol(sym):
    with pytest.raises(ValueError):
        r32_info(sym, 1)


@pytest.mark.parametrize("sym", [-1, 1 << 32])
def test_r64_info_rejects_bad_symbol(sym):
    with pytest.raises(ValueError):
        r64_info(sym, 1)


def test_decoders_reject_out_of_range_info():
    with pytest.raises(ValueError):
        r32_sym(1 << 32)
    with pytest.raises(ValueError):
        r32_type(-1)
    with pytest.raises(ValueError):
        r64_sym(1 << 64)
    with pytest.raises(ValueError):
        r64_type(-5)