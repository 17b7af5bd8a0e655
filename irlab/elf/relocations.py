"""ELF relocation types and the ``r_info`` packing helpers."""

from __future__ import annotations

import enum

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class I386Reloc(enum.IntEnum):
    """Relocation types for Intel 80386."""

    R_386_NONE = 0
    R_386_32 = 1
    R_386_PC32 = 2
    R_386_GOT32 = 3
    R_386_PLT32 = 4
    R_386_COPY = 5
    R_386_GLOB_DAT = 6
    R_386_JMP_SLOT = 7
    R_386_RELATIVE = 8
    R_386_GOTOFF = 9
    R_386_GOTPC = 10
    R_386_32PLT = 11
    R_386_TLS_TPOFF = 14
    R_386_TLS_IE = 15
    R_386_TLS_GOTIE = 16
    R_386_TLS_LE = 17
    R_386_TLS_GD = 18
    R_386_TLS_LDM = 19
    R_386_16 = 20
    R_386_PC16 = 21
    R_386_8 = 22
    R_386_PC8 = 23
    R_386_TLS_GD_32 = 24
    R_386_TLS_GD_PUSH = 25
    R_386_TLS_GD_CALL = 26
    R_386_TLS_GD_POP = 27
    R_386_TLS_LDM_32 = 28
    R_386_TLS_LDM_PUSH = 29
    R_386_TLS_LDM_CALL = 30
    R_386_TLS_LDM_POP = 31
    R_386_TLS_LDO_32 = 32
    R_386_TLS_IE_32 = 33
    R_386_TLS_LE_32 = 34
    R_386_TLS_DTPMOD32 = 35
    R_386_TLS_DTPOFF32 = 36
    R_386_TLS_TPOFF32 = 37
    R_386_SIZE32 = 38
    R_386_TLS_GOTDESC = 39
    R_386_TLS_DESC_CALL = 40
    R_386_TLS_DESC = 41
    R_386_IRELATIVE = 42
    R_386_GOT32X = 43


class X8664Reloc(enum.IntEnum):
    """Relocation types for x86-64."""

    R_X86_64_NONE = 0
    R_X86_64_64 = 1
    R_X86_64_PC32 = 2
    R_X86_64_GOT32 = 3
    R_X86_64_PLT32 = 4
    R_X86_64_COPY = 5
    R_X86_64_GLOB_DAT = 6
    R_X86_64_JUMP_SLOT = 7
    R_X86_64_RELATIVE = 8
    R_X86_64_GOTPCREL = 9
    R_X86_64_32 = 10
    R_X86_64_32S = 11
    R_X86_64_16 = 12
    R_X86_64_PC16 = 13
    R_X86_64_8 = 14
    R_X86_64_PC8 = 15
    R_X86_64_DTPMOD64 = 16
    R_X86_64_DTPOFF64 = 17
    R_X86_64_TPOFF64 = 18
    R_X86_64_TLSGD = 19
    R_X86_64_TLSLD = 20
    R_X86_64_DTPOFF32 = 21
    R_X86_64_GOTTPOFF = 22
    R_X86_64_TPOFF32 = 23
    R_X86_64_PC64 = 24
    R_X86_64_GOTOFF64 = 25
    R_X86_64_GOTPC32 = 26
    R_X86_64_GOT64 = 27
    R_X86_64_GOTPCREL64 = 28
    R_X86_64_GOTPC64 = 29
    R_X86_64_GOTPLT64 = 30
    R_X86_64_PLTOFF64 = 31
    R_X86_64_GOTPC32_TLSDESC = 34
    R_X86_64_TLSDESC_CALL = 35
    R_X86_64_TLSDESC = 36
    R_X86_64_IRELATIVE = 37
    R_X86_64_GNU_VTINHERIT = 250
    R_X86_64_GNU_VTENTRY = 251


class AmdgpuReloc(enum.IntEnum):
    """Relocation types for AMDGPU."""

    R_AMDGPU_NONE = 0
    R_AMDGPU_ABS32_LO = 1
    R_AMDGPU_ABS32_HI = 2
    R_AMDGPU_ABS64 = 3
    R_AMDGPU_REL32 = 4
    R_AMDGPU_REL64 = 5
    R_AMDGPU_ABS32 = 6
    R_AMDGPU_GOTPCREL = 7
    R_AMDGPU_GOTPCREL32_LO = 8
    R_AMDGPU_GOTPCREL32_HI = 9
    R_AMDGPU_REL32_LO = 10
    R_AMDGPU_REL32_HI = 11
    R_AMDGPU_RELATIVE64 = 13


class Aarch64Reloc(enum.IntEnum):
    """Relocation types for AArch64."""

    R_AARCH64_NONE = 0
    R_AARCH64_P32_ABS32 = 1
    R_AARCH64_P32_COPY = 180
    R_AARCH64_P32_GLOB_DAT = 181
    R_AARCH64_P32_JUMP_SLOT = 182
    R_AARCH64_P32_RELATIVE = 183
    R_AARCH64_P32_TLS_DTPMOD = 184
    R_AARCH64_P32_TLS_DTPREL = 185
    R_AARCH64_P32_TLS_TPREL = 186
    R_AARCH64_P32_TLSDESC = 187
    R_AARCH64_P32_IRELATIVE = 188
    R_AARCH64_ABS64 = 257
    R_AARCH64_ABS32 = 258
    R_AARCH64_ABS16 = 259
    R_AARCH64_PREL64 = 260
    R_AARCH64_PREL32 = 261
    R_AARCH64_PREL16 = 262
    R_AARCH64_MOVW_UABS_G0 = 263
    R_AARCH64_MOVW_UABS_G0_NC = 264
    R_AARCH64_MOVW_UABS_G1 = 265
    R_AARCH64_MOVW_UABS_G1_NC = 266
    R_AARCH64_MOVW_UABS_G2 = 267
    R_AARCH64_MOVW_UABS_G2_NC = 268
    R_AARCH64_MOVW_UABS_G3 = 269
    R_AARCH64_MOVW_SABS_G0 = 270
    R_AARCH64_MOVW_SABS_G1 = 271
    R_AARCH64_MOVW_SABS_G2 = 272
    R_AARCH64_LD_PREL_LO19 = 273
    R_AARCH64_ADR_PREL_LO21 = 274
    R_AARCH64_ADR_PREL_PG_HI21 = 275
    R_AARCH64_ADR_PREL_PG_HI21_NC = 276
    R_AARCH64_ADD_ABS_LO12_NC = 277
    R_AARCH64_LDST8_ABS_LO12_NC = 278
    R_AARCH64_TSTBR14 = 279
    R_AARCH64_CONDBR19 = 280
    R_AARCH64_JUMP26 = 282
    R_AARCH64_CALL26 = 283
    R_AARCH64_LDST16_ABS_LO12_NC = 284
    R_AARCH64_LDST32_ABS_LO12_NC = 285
    R_AARCH64_LDST64_ABS_LO12_NC = 286
    R_AARCH64_MOVW_PREL_G0 = 287
    R_AARCH64_MOVW_PREL_G0_NC = 288
    R_AARCH64_MOVW_PREL_G1 = 289
    R_AARCH64_MOVW_PREL_G1_NC = 290
    R_AARCH64_MOVW_PREL_G2 = 291
    R_AARCH64_MOVW_PREL_G2_NC = 292
    R_AARCH64_MOVW_PREL_G3 = 293
    R_AARCH64_LDST128_ABS_LO12_NC = 299
    R_AARCH64_MOVW_GOTOFF_G0 = 300
    R_AARCH64_MOVW_GOTOFF_G0_NC = 301
    R_AARCH64_MOVW_GOTOFF_G1 = 302
    R_AARCH64_MOVW_GOTOFF_G1_NC = 303
    R_AARCH64_MOVW_GOTOFF_G2 = 304
    R_AARCH64_MOVW_GOTOFF_G2_NC = 305
    R_AARCH64_MOVW_GOTOFF_G3 = 306
    R_AARCH64_GOTREL64 = 307
    R_AARCH64_GOTREL32 = 308
    R_AARCH64_GOT_LD_PREL19 = 309
    R_AARCH64_LD64_GOTOFF_LO15 = 310
    R_AARCH64_ADR_GOT_PAGE = 311
    R_AARCH64_LD64_GOT_LO12_NC = 312
    R_AARCH64_LD64_GOTPAGE_LO15 = 313
    R_AARCH64_TLSGD_ADR_PREL21 = 512
    R_AARCH64_TLSGD_ADR_PAGE21 = 513
    R_AARCH64_TLSGD_ADD_LO12_NC = 514
    R_AARCH64_TLSGD_MOVW_G1 = 515
    R_AARCH64_TLSGD_MOVW_G0_NC = 516
    R_AARCH64_TLSLD_ADR_PREL21 = 517
    R_AARCH64_TLSLD_ADR_PAGE21 = 518
    R_AARCH64_TLSLD_ADD_LO12_NC = 519
    R_AARCH64_TLSLD_MOVW_G1 = 520
    R_AARCH64_TLSLD_MOVW_G0_NC = 521
    R_AARCH64_TLSLD_LD_PREL19 = 522
    R_AARCH64_TLSLD_MOVW_DTPREL_G2 = 523
    R_AARCH64_TLSLD_MOVW_DTPREL_G1 = 524
    R_AARCH64_TLSLD_MOVW_DTPREL_G1_NC = 525
    R_AARCH64_TLSLD_MOVW_DTPREL_G0 = 526
    R_AARCH64_TLSLD_MOVW_DTPREL_G0_NC = 527
    R_AARCH64_TLSLD_ADD_DTPREL_HI12 = 528
    R_AARCH64_TLSLD_ADD_DTPREL_LO12 = 529
    R_AARCH64_TLSLD_ADD_DTPREL_LO12_NC = 530
    R_AARCH64_TLSLD_LDST8_DTPREL_LO12 = 531
    R_AARCH64_TLSLD_LDST8_DTPREL_LO12_NC = 532
    R_AARCH64_TLSLD_LDST16_DTPREL_LO12 = 533
    R_AARCH64_TLSLD_LDST16_DTPREL_LO12_NC = 534
    R_AARCH64_TLSLD_LDST32_DTPREL_LO12 = 535
    R_AARCH64_TLSLD_LDST32_DTPREL_LO12_NC = 536
    R_AARCH64_TLSLD_LDST64_DTPREL_LO12 = 537
    R_AARCH64_TLSLD_LDST64_DTPREL_LO12_NC = 538
    R_AARCH64_TLSIE_MOVW_GOTTPREL_G1 = 539
    R_AARCH64_TLSIE_MOVW_GOTTPREL_G0_NC = 540
    R_AARCH64_TLSIE_ADR_GOTTPREL_PAGE21 = 541
    R_AARCH64_TLSIE_LD64_GOTTPREL_LO12_NC = 542
    R_AARCH64_TLSIE_LD_GOTTPREL_PREL19 = 543
    R_AARCH64_TLSLE_MOVW_TPREL_G2 = 544
    R_AARCH64_TLSLE_MOVW_TPREL_G1 = 545
    R_AARCH64_TLSLE_MOVW_TPREL_G1_NC = 546
    R_AARCH64_TLSLE_MOVW_TPREL_G0 = 547
    R_AARCH64_TLSLE_MOVW_TPREL_G0_NC = 548
    R_AARCH64_TLSLE_ADD_TPREL_HI12 = 549
    R_AARCH64_TLSLE_ADD_TPREL_LO12 = 550
    R_AARCH64_TLSLE_ADD_TPREL_LO12_NC = 551
    R_AARCH64_TLSLE_LDST8_TPREL_LO12 = 552
    R_AARCH64_TLSLE_LDST8_TPREL_LO12_NC = 553
    R_AARCH64_TLSLE_LDST16_TPREL_LO12 = 554
    R_AARCH64_TLSLE_LDST16_TPREL_LO12_NC = 555
    R_AARCH64_TLSLE_LDST32_TPREL_LO12 = 556
    R_AARCH64_TLSLE_LDST32_TPREL_LO12_NC = 557
    R_AARCH64_TLSLE_LDST64_TPREL_LO12 = 558
    R_AARCH64_TLSLE_LDST64_TPREL_LO12_NC = 559
    R_AARCH64_TLSDESC_LD_PREL19 = 560
    R_AARCH64_TLSDESC_ADR_PREL21 = 561
    R_AARCH64_TLSDESC_ADR_PAGE21 = 562
    R_AARCH64_TLSDESC_LD64_LO12 = 563
    R_AARCH64_TLSDESC_ADD_LO12 = 564
    R_AARCH64_TLSDESC_OFF_G1 = 565
    R_AARCH64_TLSDESC_OFF_G0_NC = 566
    R_AARCH64_TLSDESC_LDR = 567
    R_AARCH64_TLSDESC_ADD = 568
    R_AARCH64_TLSDESC_CALL = 569
    R_AARCH64_TLSLE_LDST128_TPREL_LO12 = 570
    R_AARCH64_TLSLE_LDST128_TPREL_LO12_NC = 571
    R_AARCH64_TLSLD_LDST128_DTPREL_LO12 = 572
    R_AARCH64_TLSLD_LDST128_DTPREL_LO12_NC = 573
    R_AARCH64_COPY = 1024
    R_AARCH64_GLOB_DAT = 1025
    R_AARCH64_JUMP_SLOT = 1026
    R_AARCH64_RELATIVE = 1027
    R_AARCH64_TLS_DTPMOD = 1028
    R_AARCH64_TLS_DTPMOD64 = 1028
    R_AARCH64_TLS_DTPREL = 1029
    R_AARCH64_TLS_DTPREL64 = 1029
    R_AARCH64_TLS_TPREL = 1030
    R_AARCH64_TLS_TPREL64 = 1030
    R_AARCH64_TLSDESC = 1031


def _unsigned(name: str, value: int, limit: int) -> int:
    value = int(value)
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value}")
    return value


def r32_sym(info: int) -> int:
    """Return the symbol index of a 32-bit ``r_info`` word."""
    return _unsigned("info", info, _U32) >> 8


def r32_type(info: int) -> int:
    """Return the relocation type of a 32-bit ``r_info`` word."""
    return _unsigned("info", info, _U32) & 0xFF


def r32_info(sym: int, kind: int) -> int:
    """Pack a symbol index and a relocation type into a 32-bit ``r_info``.

    Only the low byte of ``kind`` is kept.
    """
    sym = _unsigned("symbol index", sym, _U32 >> 8)
    return (sym << 8) + (int(kind) & 0xFF)


def r64_sym(info: int) -> int:
    """Return the symbol index of a 64-bit ``r_info`` word."""
    return _unsigned("info", info, _U64) >> 32


def r64_type(info: int) -> int:
    """Return the relocation type of a 64-bit ``r_info`` word."""
    return _unsigned("info", info, _U64) & _U32


def r64_info(sym: int, kind: int) -> int:
    """Pack a symbol index and a relocation type into a 64-bit ``r_info``.

    Only the low 32 bits of ``kind`` are kept.
    """
    sym = _unsigned("symbol index", sym, _U32)
    return (sym << 32) + (int(kind) & _U32)