import pytest

from irlab.elf.ident import ElfClass, Encoding, is_elf_magic, make_ident
from irlab.elf.sections import SymbolBinding, SymbolType, st_info
from irlab.elf.structs import (
    AuxEntry,
    CompressionHeader,
    DynamicEntry,
    FileHeader,
    ProgramHeader,
    Relocation,
    SectionHeader,
    Symbol,
    VersionNeed,
    VersionNeedAux,
)

CLASSES = [ElfClass.ELF32, ElfClass.ELF64]
ORDERS = [True, False]


def _records():
    return [
        FileHeader(
            e_ident=make_ident(ElfClass.ELF64, Encoding.LSB),
            e_type=2,
            e_machine=62,
            e_version=1,
            e_entry=0x401000,
            e_phoff=64,
            e_shoff=0x2000,
            e_ehsize=64,
            e_phentsize=56,
            e_phnum=3,
            e_shentsize=64,
            e_shnum=7,
            e_shstrndx=6,
        ),
        SectionHeader(1, 1, 6, 0x1000, 0x200, 0x80, 0, 0, 16, 0),
        ProgramHeader(p_type=1, p_flags=5, p_offset=0, p_vaddr=0x400000,
                      p_paddr=0x400000, p_filesz=0x300, p_memsz=0x400, p_align=0x1000),
        Symbol(st_name=9, st_value=0x1234, st_size=42,
               st_info=st_info(SymbolBinding.GLOBAL, SymbolType.FUNC), st_other=2, st_shndx=3),
        DynamicEntry(d_tag=1, d_val=77),
        AuxEntry(a_type=6, a_val=4096),
    ]


@pytest.mark.parametrize("elf_class", CLASSES)
@pytest.mark.parametrize("little", ORDERS)
@pytest.mark.parametrize("index", range(6))
def test_round_trip(elf_class, little, index):
    record = _records()[index]
    data = record.pack(elf_class, little)
    assert len(data) == type(record).size(elf_class)
    assert type(record).unpack(data, elf_class, little) == record


def test_file_header_sizes():
    assert FileHeader.size(ElfClass.ELF32) == 52
    assert FileHeader.size(ElfClass.ELF64) == 64


def test_dynamic_entry_wire_bytes():
    assert DynamicEntry(d_tag=1, d_val=2).pack(ElfClass.ELF32, True) == (
        b"\x01\x00\x00\x00\x02\x00\x00\x00"
    )


def test_file_header_keeps_ident():
    header = FileHeader(e_ident=make_ident(ElfClass.ELF32, Encoding.MSB))
    data = header.pack(ElfClass.ELF32, False)
    assert is_elf_magic(data)
    assert FileHeader.unpack(data, ElfClass.ELF32, False).e_ident == header.e_ident


def test_file_header_rejects_short_ident():
    with pytest.raises(ValueError):
        FileHeader(e_ident=b"\x7fELF").pack(ElfClass.ELF64, True)


def test_program_header_flags_position_differs_by_class():
    header = ProgramHeader(p_flags=0xABCD)
    expected = (0xABCD).to_bytes(4, "little")
    assert header.pack(ElfClass.ELF64, True)[4:8] == expected
    assert header.pack(ElfClass.ELF32, True)[24:28] == expected


def test_symbol_info_accessors():
    info = st_info(SymbolBinding.WEAK, SymbolType.OBJECT)
    symbol = Symbol.unpack(Symbol(st_info=info).pack(ElfClass.ELF64, True), ElfClass.ELF64, True)
    assert symbol.bind == SymbolBinding.WEAK
    assert symbol.type == SymbolType.OBJECT


@pytest.mark.parametrize("elf_class", CLASSES)
def test_big_endian_is_byte_reversed_per_word(elf_class):
    entry = AuxEntry(a_type=0x01020304, a_val=0x0A0B0C0D)
    little = entry.pack(elf_class, True)
    big = entry.pack(elf_class, False)
    width = AuxEntry.size(elf_class) // 2
    assert big[:width] == little[:width][::-1]
    assert big[width:] == little[width:][::-1]


@pytest.mark.parametrize("elf_class", CLASSES)
def test_relocation_with_negative_addend(elf_class):
    reloc = Relocation(r_offset=0x10, r_info=0x207, r_addend=-4)
    data = reloc.pack(elf_class, True, True)
    assert len(data) == Relocation.size(elf_class, True)
    assert Relocation.unpack(data, elf_class, True, True) == reloc


@pytest.mark.parametrize("elf_class", CLASSES)
def test_relocation_without_addend_drops_it(elf_class):
    reloc = Relocation(r_offset=0x10, r_info=0x207, r_addend=-4)
    data = reloc.pack(elf_class, True)
    assert Relocation.size(elf_class) < Relocation.size(elf_class, True)
    back = Relocation.unpack(data, elf_class, True)
    assert (back.r_offset, back.r_info, back.r_addend) == (0x10, 0x207, 0)


@pytest.mark.parametrize("elf_class", CLASSES)
def test_dynamic_tag_is_signed(elf_class):
    entry = DynamicEntry(d_tag=-1, d_val=5)
    assert DynamicEntry.unpack(entry.pack(elf_class, False), elf_class, False) == entry


@pytest.mark.parametrize("little", ORDERS)
def test_version_records_round_trip(little):
    need = VersionNeed(vn_version=1, vn_cnt=2, vn_file=3, vn_aux=16, vn_next=0)
    aux = VersionNeedAux(vna_hash=0x0D696914, vna_flags=0, vna_other=2, vna_name=5, vna_next=16)
    need_bytes = need.pack(little)
    aux_bytes = aux.pack(little)
    assert len(need_bytes) == VersionNeed.SIZE
    assert len(aux_bytes) == VersionNeedAux.SIZE
    assert VersionNeed.unpack(need_bytes, little) == need
    assert VersionNeedAux.unpack(aux_bytes, little) == aux


def test_compression_header_reserved_only_in_64bit():
    header = CompressionHeader(ch_type=1, ch_size=0x1000, ch_addralign=8, ch_reserved=9)
    back32 = CompressionHeader.unpack(header.pack(ElfClass.ELF32, True), ElfClass.ELF32, True)
    back64 = CompressionHeader.unpack(header.pack(ElfClass.ELF64, True), ElfClass.ELF64, True)
    assert back32.ch_reserved == 0
    assert back32.ch_size == header.ch_size
    assert back64 == header


def test_unpack_rejects_short_data():
    data = SectionHeader().pack(ElfClass.ELF64, True)
    with pytest.raises(ValueError):
        SectionHeader.unpack(data[:-1], ElfClass.ELF64, True)


def test_unpack_ignores_trailing_bytes():
    entry = AuxEntry(a_type=3, a_val=64)
    data = entry.pack(ElfClass.ELF32, True) + b"\xff" * 5
    assert AuxEntry.unpack(data, ElfClass.ELF32, True) == entry


@pytest.mark.parametrize("bad_class", [ElfClass.NONE, 7])
def test_unsupported_class_rejected(bad_class):
    with pytest.raises(ValueError):
        Symbol.size(bad_class)
    with pytest.raises(ValueError):
        Symbol().pack(bad_class, True)


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        SectionHeader(sh_addr=1 << 32).pack(ElfClass.ELF32, True)


def test_64bit_layouts_are_larger():
    for record in (FileHeader, SectionHeader, ProgramHeader, Symbol, DynamicEntry, AuxEntry):
        assert record.size(ElfClass.ELF64) > record.size(ElfClass.ELF32)