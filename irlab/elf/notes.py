"""ELF note descriptor types, grouped by the note owner name."""

from __future__ import annotations

import enum

SPU_NOTE = 1
"""Note type used by notes whose name starts with ``SPU``."""

MEMTAG_TYPE_AARCH_MTE = 0x400
"""AArch64 MTE memory tags, the ARM-specific kind of a MEMTAG note."""


class CoreNote(enum.IntEnum):
    """Note types found in core files (owner name ``CORE``)."""

    PRSTATUS = 1
    FPREGSET = 2
    PRPSINFO = 3
    TASKSTRUCT = 4
    AUXV = 6
    PSTATUS = 10
    FPREGS = 12
    PSINFO = 13
    LWPSTATUS = 16
    LWPSINFO = 17
    WIN32PSTATUS = 18
    LARCH_LBT = 0xA04
    SIGINFO = 0x53494749
    FILE = 0x46494C45
    GDB_TDESC = 0xFF000000
    MEMTAG = 0xFF000001


class LinuxNote(enum.IntEnum):
    """Register-set note types whose owner name must be ``LINUX``."""

    PRXFPREG = 0x46E62B7F
    PPC_VMX = 0x100
    PPC_VSX = 0x102
    PPC_TAR = 0x103
    PPC_PPR = 0x104
    PPC_DSCR = 0x105
    PPC_EBB = 0x106
    PPC_PMU = 0x107
    PPC_TM_CGPR = 0x108
    PPC_TM_CFPR = 0x109
    PPC_TM_CVMX = 0x10A
    PPC_TM_CVSX = 0x10B
    PPC_TM_SPR = 0x10C
    PPC_TM_CTAR = 0x10D
    PPC_TM_CPPR = 0x10E
    PPC_TM_CDSCR = 0x10F
    I386_TLS = 0x200
    I386_IOPERM = 0x201
    X86_XSTATE = 0x202
    X86_CET = 0x203
    S390_HIGH_GPRS = 0x300
    S390_TIMER = 0x301
    S390_TODCMP = 0x302
    S390_TODPREG = 0x303
    S390_CTRS = 0x304
    S390_PREFIX = 0x305
    S390_LAST_BREAK = 0x306
    S390_SYSTEM_CALL = 0x307
    S390_TDB = 0x308
    S390_VXRS_LOW = 0x309
    S390_VXRS_HIGH = 0x30A
    S390_GS_CB = 0x30B
    S390_GS_BC = 0x30C
    ARM_VFP = 0x400
    ARM_TLS = 0x401
    ARM_HW_BREAK = 0x402
    ARM_HW_WATCH = 0x403
    ARM_SVE = 0x405
    ARM_PAC_MASK = 0x406
    ARM_PACA_KEYS = 0x407
    ARM_PACG_KEYS = 0x408
    ARM_TAGGED_ADDR_CTRL = 0x409
    ARM_PAC_ENABLED_KEYS = 0x40A
    ARC_V2 = 0x600
    RISCV_CSR = 0x900
    LARCH_CPUCFG = 0xA00
    LARCH_CSR = 0xA01
    LARCH_LSX = 0xA02
    LARCH_LASX = 0xA03


class FreeBsdNote(enum.IntEnum):
    """Note types whose owner name is ``FreeBSD``."""

    THRMISC = 7
    PROCSTAT_PROC = 8
    PROCSTAT_FILES = 9
    PROCSTAT_VMMAP = 10
    PROCSTAT_GROUPS = 11
    PROCSTAT_UMASK = 12
    PROCSTAT_RLIMIT = 13
    PROCSTAT_OSREL = 14
    PROCSTAT_PSSTRINGS = 15
    PROCSTAT_AUXV = 16
    PTLWPINFO = 17


class NetBsdNote(enum.IntEnum):
    """Note types whose owner name starts with ``NetBSD-CORE``."""

    PROCINFO = 1
    AUXV = 2
    LWPSTATUS = 24
    FIRSTMACH = 32


class OpenBsdNote(enum.IntEnum):
    """Note types whose owner name is ``OpenBSD``."""

    PROCINFO = 10
    AUXV = 11
    REGS = 20
    FPREGS = 21
    XFPREGS = 22
    WCOOKIE = 23


class ObjectNote(enum.IntEnum):
    """Note types used in object files under any other owner name."""

    VERSION = 1
    ARCH = 2
    STAPSDT = 3
    GO_BUILDID = 4


class GnuNote(enum.IntEnum):
    """Note types in non-core files whose owner name is ``GNU``."""

    ABI_TAG = 1
    HWCAP = 2
    BUILD_ID = 3
    GOLD_VERSION = 4
    PROPERTY_TYPE_0 = 5
    BUILD_ATTRIBUTE_OPEN = 0x100
    BUILD_ATTRIBUTE_FUNC = 0x101


_EXACT_OWNERS: dict[str, type[enum.IntEnum]] = {
    "CORE": CoreNote,
    "LINUX": LinuxNote,
    "FreeBSD": FreeBsdNote,
    "OpenBSD": OpenBsdNote,
    "GNU": GnuNote,
}


def note_types_for(name: str | bytes) -> type[enum.IntEnum]:
    """Return the enumeration of note types that applies to owner ``name``.

    ``name`` may be text or the raw bytes of a note, with or without its
    terminating NUL bytes. Names not tied to a particular owner get
    :class:`ObjectNote`.
    """
    if isinstance(name, (bytes, bytearray)):
        name = bytes(name).decode("ascii", errors="replace")
    name = name.rstrip("\0")
    if name in _EXACT_OWNERS:
        return _EXACT_OWNERS[name]
    if name.startswith("NetBSD-CORE"):
        return NetBsdNote
    return ObjectNote