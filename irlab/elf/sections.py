"""ELF section and symbol constants, with the symbol info helpers."""

from __future__ import annotations

import enum


class SectionIndex(enum.IntEnum):
    """Special section indexes."""

    UNDEF = 0
    LORESERVE = 0xFF00
    LOPROC = 0xFF00
    HIPROC = 0xFF1F
    LOOS = 0xFF20
    HIOS = 0xFF3F
    ABS = 0xFFF1
    COMMON = 0xFFF2
    XINDEX = 0xFFFF
    HIRESERVE = 0xFFFF


class SectionType(enum.IntEnum):
    """Section types (``sh_type``)."""

    NULL = 0
    PROGBITS = 1
    SYMTAB = 2
    STRTAB = 3
    RELA = 4
    HASH = 5
    DYNAMIC = 6
    NOTE = 7
    NOBITS = 8
    REL = 9
    SHLIB = 10
    DYNSYM = 11
    INIT_ARRAY = 14
    FINI_ARRAY = 15
    PREINIT_ARRAY = 16
    GROUP = 17
    SYMTAB_SHNDX = 18
    GNU_ATTRIBUTES = 0x6FFFFFF5
    GNU_HASH = 0x6FFFFFF6
    GNU_LIBLIST = 0x6FFFFFF7
    CHECKSUM = 0x6FFFFFF8
    LOSUNW = 0x6FFFFFFA
    SUNW_MOVE = 0x6FFFFFFA
    SUNW_COMDAT = 0x6FFFFFFB
    SUNW_SYMINFO = 0x6FFFFFFC
    GNU_VERDEF = 0x6FFFFFFD
    GNU_VERNEED = 0x6FFFFFFE
    GNU_VERSYM = 0x6FFFFFFF
    LOOS = 0x60000000
    HIOS = 0x6FFFFFFF
    LOPROC = 0x70000000
    ARM_EXIDX = 0x70000001
    ARM_PREEMPTMAP = 0x70000002
    ARM_ATTRIBUTES = 0x70000003
    ARM_DEBUGOVERLAY = 0x70000004
    ARM_OVERLAYSECTION = 0x70000005
    HIPROC = 0x7FFFFFFF
    LOUSER = 0x80000000
    RPL_EXPORTS = 0x80000001
    RPL_IMPORTS = 0x80000002
    RPL_CRCS = 0x80000003
    RPL_FILEINFO = 0x80000004
    HIUSER = 0xFFFFFFFF


class SectionFlag(enum.IntFlag):
    """Section attribute flags (``sh_flags``)."""

    WRITE = 0x1
    ALLOC = 0x2
    EXECINSTR = 0x4
    MERGE = 0x10
    STRINGS = 0x20
    INFO_LINK = 0x40
    LINK_ORDER = 0x80
    OS_NONCONFORMING = 0x100
    GROUP = 0x200
    TLS = 0x400
    COMPRESSED = 0x800
    GNU_RETAIN = 0x200000
    GNU_MBIND = 0x01000000
    RPX_DEFLATE = 0x08000000
    MIPS_GPREL = 0x10000000
    ORDERED = 0x40000000
    EXCLUDE = 0x80000000
    MASKOS = 0x0FF00000
    MASKPROC = 0xF0000000


class GroupFlag(enum.IntFlag):
    """Section group flags."""

    COMDAT = 0x1
    MASKOS = 0x0FF00000
    MASKPROC = 0xF0000000


class SymbolBinding(enum.IntEnum):
    """Symbol binding, the high nibble of ``st_info``."""

    LOCAL = 0
    GLOBAL = 1
    WEAK = 2
    LOOS = 10
    HIOS = 12
    MULTIDEF = 13
    LOPROC = 13
    HIPROC = 15


class SymbolType(enum.IntEnum):
    """Symbol type, the low nibble of ``st_info``."""

    NOTYPE = 0
    OBJECT = 1
    FUNC = 2
    SECTION = 3
    FILE = 4
    COMMON = 5
    TLS = 6
    LOOS = 10
    AMDGPU_HSA_KERNEL = 10
    HIOS = 12
    LOPROC = 13
    HIPROC = 15


class SymbolVisibility(enum.IntEnum):
    """Symbol visibility, the low two bits of ``st_other``."""

    DEFAULT = 0
    INTERNAL = 1
    HIDDEN = 2
    PROTECTED = 3


def _byte(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")
    return value


def st_bind(info: int) -> int:
    """Return the binding stored in a symbol's ``st_info`` byte."""
    return _byte("info", info) >> 4


def st_type(info: int) -> int:
    """Return the type stored in a symbol's ``st_info`` byte."""
    return _byte("info", info) & 0xF


def st_info(bind: int, kind: int) -> int:
    """Combine a binding and a type into an ``st_info`` byte."""
    bind = int(bind)
    if not 0 <= bind <= 0xF:
        raise ValueError(f"binding must fit in four bits, got {bind}")
    return (bind << 4) + (int(kind) & 0xF)


def st_visibility(other: int) -> SymbolVisibility:
    """Return the visibility stored in a symbol's ``st_other`` byte."""
    return SymbolVisibility(_byte("other", other) & 0x3)