import itertools

import pytest

from irlab.elf.sections import (
    GroupFlag,
    SectionFlag,
    SymbolBinding,
    SymbolType,
    SymbolVisibility,
    st_bind,
    st_info,
    st_type,
    st_visibility,
)


@pytest.mark.parametrize(
    "bind,kind",
    list(itertools.product(list(SymbolBinding), list(SymbolType))),
)
def test_info_round_trip(bind, kind):
    info = st_info(bind, kind)
    assert 0 <= info <= 0xFF
    assert st_bind(info) == bind
    assert st_type(info) == kind


@pytest.mark.parametrize("info", range(256))
def test_info_split_and_join(info):
    assert st_info(st_bind(info), st_type(info)) == info


def test_info_keeps_only_low_nibble_of_type():
    assert st_info(SymbolBinding.WEAK, 0x10 | SymbolType.FUNC) == st_info(
        SymbolBinding.WEAK, SymbolType.FUNC
    )


def test_info_rejects_wide_binding():
    with pytest.raises(ValueError):
        st_info(16, SymbolType.NOTYPE)


@pytest.mark.parametrize("bad", [-1, 256])
def test_bind_and_type_reject_non_bytes(bad):
    with pytest.raises(ValueError):
        st_bind(bad)
    with pytest.raises(ValueError):
        st_type(bad)


@pytest.mark.parametrize("visibility", list(SymbolVisibility))
def test_visibility_ignores_high_bits(visibility):
    assert st_visibility(0xF0 | visibility) is visibility
    assert st_visibility(visibility) is visibility


def test_visibility_rejects_non_byte():
    with pytest.raises(ValueError):
        st_visibility(0x100)


def test_section_flags_from_raw_value():
    flags = SectionFlag(0x3)
    assert flags == SectionFlag.WRITE | SectionFlag.ALLOC
    assert SectionFlag.ALLOC in flags
    assert SectionFlag.EXECINSTR not in flags
    assert flags & ~SectionFlag.WRITE == SectionFlag.ALLOC


def test_processor_flags_within_mask():
    mask_proc = SectionFlag(0xF0000000)
    mask_os = SectionFlag(0x0FF00000)
    for raw in (0x10000000, 0x40000000, 0x80000000):
        flag = SectionFlag(raw)
        assert flag & mask_proc == flag
        assert flag & mask_os == 0
    deflate = SectionFlag(0x08000000)
    assert deflate is SectionFlag.RPX_DEFLATE
    assert deflate & mask_os == deflate


def test_group_masks_disjoint():
    mask_os = GroupFlag(0x0FF00000)
    mask_proc = GroupFlag(0xF0000000)
    comdat = GroupFlag(0x1)
    assert comdat is GroupFlag.COMDAT
    assert mask_os & mask_proc == 0
    assert comdat & (mask_os | mask_proc) == 0