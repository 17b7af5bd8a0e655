"""AMDGPU-specific ELF header flags (``e_flags``)."""

from __future__ import annotations

import enum

MACH_MASK = 0x0FF
"""Bits of ``e_flags`` that select the AMDGPU processor."""

XNACK = 0x100
"""Set when the XNACK target feature is enabled for all code in the file."""


class AmdgpuFeature(enum.IntEnum):
    """Target feature bits of ``e_flags`` for the various code object versions."""

    XNACK_V2 = 0x01
    TRAP_HANDLER_V2 = 0x02
    XNACK_V3 = 0x100
    SRAMECC_V3 = 0x200
    XNACK_V4 = 0x300
    XNACK_UNSUPPORTED_V4 = 0x000
    XNACK_ANY_V4 = 0x100
    XNACK_OFF_V4 = 0x200
    XNACK_ON_V4 = 0x300
    SRAMECC_V4 = 0xC00
    SRAMECC_UNSUPPORTED_V4 = 0x000
    SRAMECC_ANY_V4 = 0x400
    SRAMECC_OFF_V4 = 0x800
    SRAMECC_ON_V4 = 0xC00


class AmdgpuMach(enum.IntEnum):
    """AMDGPU processor selected by the low byte of ``e_flags``."""

    NONE = 0x000
    R600_R600 = 0x001
    R600_R630 = 0x002
    R600_RS880 = 0x003
    R600_RV670 = 0x004
    R600_RV710 = 0x005
    R600_RV730 = 0x006
    R600_RV770 = 0x007
    R600_CEDAR = 0x008
    R600_CYPRESS = 0x009
    R600_JUNIPER = 0x00A
    R600_REDWOOD = 0x00B
    R600_SUMO = 0x00C
    R600_BARTS = 0x00D
    R600_CAICOS = 0x00E
    R600_CAYMAN = 0x00F
    R600_TURKS = 0x010
    R600_RESERVED_FIRST = 0x011
    R600_RESERVED_LAST = 0x01F
    R600_FIRST = 0x001
    R600_LAST = 0x010
    AMDGCN_GFX600 = 0x020
    AMDGCN_GFX601 = 0x021
    AMDGCN_GFX700 = 0x022
    AMDGCN_GFX701 = 0x023
    AMDGCN_GFX702 = 0x024
    AMDGCN_GFX703 = 0x025
    AMDGCN_GFX704 = 0x026
    AMDGCN_RESERVED_0X27 = 0x027
    AMDGCN_GFX801 = 0x028
    AMDGCN_GFX802 = 0x029
    AMDGCN_GFX803 = 0x02A
    AMDGCN_GFX810 = 0x02B
    AMDGCN_GFX900 = 0x02C
    AMDGCN_GFX902 = 0x02D
    AMDGCN_GFX904 = 0x02E
    AMDGCN_GFX906 = 0x02F
    AMDGCN_GFX908 = 0x030
    AMDGCN_GFX909 = 0x031
    AMDGCN_GFX90C = 0x032
    AMDGCN_GFX1010 = 0x033
    AMDGCN_GFX1011 = 0x034
    AMDGCN_GFX1012 = 0x035
    AMDGCN_GFX1030 = 0x036
    AMDGCN_GFX1031 = 0x037
    AMDGCN_GFX1032 = 0x038
    AMDGCN_GFX1033 = 0x039
    AMDGCN_GFX602 = 0x03A
    AMDGCN_GFX705 = 0x03B
    AMDGCN_GFX805 = 0x03C
    AMDGCN_RESERVED_0X3D = 0x03D
    AMDGCN_GFX1034 = 0x03E
    AMDGCN_GFX90A = 0x03F
    AMDGCN_RESERVED_0X40 = 0x040
    AMDGCN_RESERVED_0X41 = 0x041
    AMDGCN_GFX1013 = 0x042
    AMDGCN_FIRST = 0x020
    AMDGCN_LAST = 0x042


def amdgpu_mach(flags: int) -> AmdgpuMach | int:
    """Return the processor selected by ``flags``.

    A known value comes back as an :class:`AmdgpuMach` member, an unassigned
    one as a plain integer.
    """
    value = int(flags) & MACH_MASK
    try:
        return AmdgpuMach(value)
    except ValueError:
        return value


def is_r600(mach: int) -> bool:
    """Return True if ``mach`` names an R600-family processor."""
    return AmdgpuMach.R600_FIRST <= int(mach) <= AmdgpuMach.R600_LAST


def is_amdgcn(mach: int) -> bool:
    """Return True if ``mach`` names an AMDGCN-based processor."""
    return AmdgpuMach.AMDGCN_FIRST <= int(mach) <= AmdgpuMach.AMDGCN_LAST