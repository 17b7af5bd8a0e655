"""ELF segment, dynamic section and auxiliary vector constants."""

from __future__ import annotations

import enum


class SegmentType(enum.IntEnum):
    """Program header segment types (``p_type``)."""

    NULL = 0
    LOAD = 1
    DYNAMIC = 2
    INTERP = 3
    NOTE = 4
    SHLIB = 5
    PHDR = 6
    TLS = 7
    LOOS = 0x60000000
    GNU_EH_FRAME = 0x6474E550
    GNU_STACK = 0x6474E551
    GNU_RELRO = 0x6474E552
    GNU_PROPERTY = 0x6474E553
    GNU_MBIND_LO = 0x6474E555
    GNU_MBIND_HI = 0x6474F554
    PAX_FLAGS = 0x65041580
    OPENBSD_RANDOMIZE = 0x65A3DBE6
    OPENBSD_WXNEEDED = 0x65A3DBE7
    OPENBSD_BOOTDATA = 0x65A41BE6
    SUNWBSS = 0x6FFFFFFA
    SUNWSTACK = 0x6FFFFFFB
    HIOS = 0x6FFFFFFF
    LOPROC = 0x70000000
    HIPROC = 0x7FFFFFFF


class SegmentFlag(enum.IntFlag):
    """Segment permission flags (``p_flags``)."""

    X = 1
    W = 2
    R = 4
    MASKOS = 0x0FF00000
    MASKPROC = 0xF0000000


class DynamicTag(enum.IntEnum):
    """Dynamic array tags (``d_tag``)."""

    NULL = 0
    NEEDED = 1
    PLTRELSZ = 2
    PLTGOT = 3
    HASH = 4
    STRTAB = 5
    SYMTAB = 6
    RELA = 7
    RELASZ = 8
    RELAENT = 9
    STRSZ = 10
    SYMENT = 11
    INIT = 12
    FINI = 13
    SONAME = 14
    RPATH = 15
    SYMBOLIC = 16
    REL = 17
    RELSZ = 18
    RELENT = 19
    PLTREL = 20
    DEBUG = 21
    TEXTREL = 22
    JMPREL = 23
    BIND_NOW = 24
    INIT_ARRAY = 25
    FINI_ARRAY = 26
    INIT_ARRAYSZ = 27
    FINI_ARRAYSZ = 28
    RUNPATH = 29
    FLAGS = 30
    ENCODING = 32
    PREINIT_ARRAY = 32
    PREINIT_ARRAYSZ = 33
    MAXPOSTAGS = 34
    LOOS = 0x6000000D
    HIOS = 0x6FFFF000
    GNU_HASH = 0x6FFFFEF5
    TLSDESC_PLT = 0x6FFFFEF6
    TLSDESC_GOT = 0x6FFFFEF7
    GNU_CONFLICT = 0x6FFFFEF8
    GNU_LIBLIST = 0x6FFFFEF9
    CONFIG = 0x6FFFFEFA
    DEPAUDIT = 0x6FFFFEFB
    AUDIT = 0x6FFFFEFC
    PLTPAD = 0x6FFFFEFD
    MOVETAB = 0x6FFFFEFE
    SYMINFO = 0x6FFFFEFF
    ADDRRNGHI = 0x6FFFFEFF
    VERSYM = 0x6FFFFFF0
    RELACOUNT = 0x6FFFFFF9
    RELCOUNT = 0x6FFFFFFA
    FLAGS_1 = 0x6FFFFFFB
    VERDEF = 0x6FFFFFFC
    VERDEFNUM = 0x6FFFFFFD
    VERNEED = 0x6FFFFFFE
    VERNEEDNUM = 0x6FFFFFFF
    LOPROC = 0x70000000
    HIPROC = 0x7FFFFFFF


class DynamicFlag(enum.IntFlag):
    """Values of the ``DT_FLAGS`` entry."""

    ORIGIN = 0x1
    SYMBOLIC = 0x2
    TEXTREL = 0x4
    BIND_NOW = 0x8
    STATIC_TLS = 0x10


class AuxType(enum.IntEnum):
    """Auxiliary vector entry types (``a_type``)."""

    NULL = 0
    IGNORE = 1
    EXECFD = 2
    PHDR = 3
    PHENT = 4
    PHNUM = 5
    PAGESZ = 6
    BASE = 7
    FLAGS = 8
    ENTRY = 9
    NOTELF = 10
    UID = 11
    EUID = 12
    GID = 13
    EGID = 14
    CLKTCK = 17
    PLATFORM = 15
    HWCAP = 16
    FPUCW = 18
    DCACHEBSIZE = 19
    ICACHEBSIZE = 20
    UCACHEBSIZE = 21
    IGNOREPPC = 22
    SECURE = 23
    BASE_PLATFORM = 24
    RANDOM = 25
    HWCAP2 = 26
    EXECFN = 31
    SYSINFO = 32
    SYSINFO_EHDR = 33
    L1I_CACHESHAPE = 34
    L1D_CACHESHAPE = 35
    L2_CACHESHAPE = 36
    L3_CACHESHAPE = 37
    L1I_CACHESIZE = 40
    L1I_CACHEGEOMETRY = 41
    L1D_CACHESIZE = 42
    L1D_CACHEGEOMETRY = 43
    L2_CACHESIZE = 44
    L2_CACHEGEOMETRY = 45
    L3_CACHESIZE = 46