import pytest

from irlab.elf.dynamic import (
    AuxType,
    DynamicFlag,
    DynamicTag,
    SegmentFlag,
    SegmentType,
)


def test_dynamic_tag_aliases():
    assert DynamicTag(32) is DynamicTag.ENCODING
    assert DynamicTag(32) is DynamicTag.PREINIT_ARRAY
    assert DynamicTag(0x6FFFFEFF) is DynamicTag.SYMINFO
    assert DynamicTag(0x6FFFFEFF) is DynamicTag.ADDRRNGHI


def test_segment_type_lookup_by_raw_value():
    assert SegmentType(0x6474E550) is SegmentType.GNU_EH_FRAME
    assert SegmentType(0x6474E551) is SegmentType.GNU_STACK


def test_segment_mbind_range_is_ordered():
    low = SegmentType(0x6474E555)
    high = SegmentType(0x6474F554)
    assert low is SegmentType.GNU_MBIND_LO
    assert high is SegmentType.GNU_MBIND_HI
    assert low < high
    assert SegmentType(0x60000000) < SegmentType(0x6474E550) < SegmentType(0x6FFFFFFF)


def test_processor_ranges_agree():
    assert DynamicTag(0x70000000) == SegmentType(0x70000000)
    assert DynamicTag(0x7FFFFFFF) == SegmentType(0x7FFFFFFF)


def test_segment_flags_combine():
    rw = SegmentFlag(6)
    assert rw == SegmentFlag.R | SegmentFlag.W
    assert SegmentFlag.R in rw
    assert SegmentFlag.W in rw
    assert SegmentFlag.X not in rw
    assert (rw | SegmentFlag(1)) & SegmentFlag.X == SegmentFlag.X


def test_segment_flag_masks_do_not_overlap_permissions():
    permissions = SegmentFlag(7)
    mask_os = SegmentFlag(0x0FF00000)
    mask_proc = SegmentFlag(0xF0000000)
    assert permissions & mask_os == 0
    assert permissions & mask_proc == 0
    assert mask_os & mask_proc == 0


@pytest.mark.parametrize("raw", [0x1, 0x2, 0x4, 0x8, 0x10])
def test_dynamic_flags_are_single_bits(raw):
    flag = DynamicFlag(raw)
    value = int(flag)
    assert value == raw
    assert value & (value - 1) == 0


def test_standard_dynamic_tags_below_os_range():
    for tag in DynamicTag:
        assert DynamicTag(int(tag)) is tag
        assert tag <= DynamicTag(34) or tag >= DynamicTag(0x6000000D)


def test_unknown_dynamic_tag_rejected():
    with pytest.raises(ValueError):
        DynamicTag(0x12345)


def test_aux_types_are_distinct():
    for member in AuxType:
        assert AuxType(int(member)) is member
    assert len({int(member) for member in AuxType}) == len(AuxType.__members__)
    assert AuxType(15) < AuxType(16) < AuxType(17)