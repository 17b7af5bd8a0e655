"""ELF file header identification constants."""

from __future__ import annotations

import enum

ELF_MAGIC = b"\x7fELF"


class FileType(enum.IntEnum):
    """Object file type (``e_type``)."""

    NONE = 0
    REL = 1
    EXEC = 2
    DYN = 3
    CORE = 4
    LOOS = 0xFE00
    HIOS = 0xFEFF
    LOPROC = 0xFF00
    HIPROC = 0xFFFF


class Machine(enum.IntEnum):
    """Target architecture (``e_machine``)."""

    NONE = 0
    M32 = 1
    SPARC = 2
    I386 = 3
    M68K = 4
    M88K = 5
    I486 = 6
    I860 = 7
    MIPS = 8
    S370 = 9
    MIPS_RS3_LE = 10
    RES011 = 11
    RES012 = 12
    RES013 = 13
    RES014 = 14
    PARISC = 15
    RES016 = 16
    VPP550 = 17
    SPARC32PLUS = 18
    I960 = 19
    PPC = 20
    PPC64 = 21
    S390 = 22
    SPU = 23
    RES024 = 24
    RES025 = 25
    RES026 = 26
    RES027 = 27
    RES028 = 28
    RES029 = 29
    RES030 = 30
    RES031 = 31
    RES032 = 32
    RES033 = 33
    RES034 = 34
    RES035 = 35
    V800 = 36
    FR20 = 37
    RH32 = 38
    MCORE = 39
    RCE = 39
    ARM = 40
    OLD_ALPHA = 41
    SH = 42
    SPARCV9 = 43
    TRICORE = 44
    ARC = 45
    H8_300 = 46
    H8_300H = 47
    H8S = 48
    H8_500 = 49
    IA_64 = 50
    MIPS_X = 51
    COLDFIRE = 52
    M68HC12 = 53
    MMA = 54
    PCP = 55
    NCPU = 56
    NDR1 = 57
    STARCORE = 58
    ME16 = 59
    ST100 = 60
    TINYJ = 61
    X86_64 = 62
    PDSP = 63
    PDP10 = 64
    PDP11 = 65
    FX66 = 66
    ST9PLUS = 67
    ST7 = 68
    M68HC16 = 69
    M68HC11 = 70
    M68HC08 = 71
    M68HC05 = 72
    SVX = 73
    ST19 = 74
    VAX = 75
    CRIS = 76
    JAVELIN = 77
    FIREPATH = 78
    ZSP = 79
    MMIX = 80
    HUANY = 81
    PRISM = 82
    AVR = 83
    FR30 = 84
    D10V = 85
    D30V = 86
    V850 = 87
    M32R = 88
    MN10300 = 89
    MN10200 = 90
    PJ = 91
    OPENRISC = 92
    ARC_A5 = 93
    XTENSA = 94
    VIDEOCORE = 95
    TMM_GPP = 96
    NS32K = 97
    TPC = 98
    SNP1K = 99
    ST200 = 100
    IP2K = 101
    MAX = 102
    CR = 103
    F2MC16 = 104
    MSP430 = 105
    BLACKFIN = 106
    SE_C33 = 107
    SEP = 108
    ARCA = 109
    UNICORE = 110
    EXCESS = 111
    DXP = 112
    ALTERA_NIOS2 = 113
    CRX = 114
    XGATE = 115
    C166 = 116
    M16C = 117
    DSPIC30F = 118
    CE = 119
    M32C = 120
    RES121 = 121
    RES122 = 122
    RES123 = 123
    RES124 = 124
    RES125 = 125
    RES126 = 126
    RES127 = 127
    RES128 = 128
    RES129 = 129
    RES130 = 130
    TSK3000 = 131
    RS08 = 132
    RES133 = 133
    ECOG2 = 134
    SCORE = 135
    SCORE7 = 135
    DSP24 = 136
    VIDEOCORE3 = 137
    LATTICEMICO32 = 138
    SE_C17 = 139
    TI_C6000 = 140
    TI_C2000 = 141
    TI_C5500 = 142
    RES143 = 143
    RES144 = 144
    RES145 = 145
    RES146 = 146
    RES147 = 147
    RES148 = 148
    RES149 = 149
    RES150 = 150
    RES151 = 151
    RES152 = 152
    RES153 = 153
    RES154 = 154
    RES155 = 155
    RES156 = 156
    RES157 = 157
    RES158 = 158
    RES159 = 159
    MMDSP_PLUS = 160
    CYPRESS_M8C = 161
    R32C = 162
    TRIMEDIA = 163
    QDSP6 = 164
    I8051 = 165
    STXP7X = 166
    NDS32 = 167
    ECOG1 = 168
    ECOG1X = 168
    MAXQ30 = 169
    XIMO16 = 170
    MANIK = 171
    CRAYNV2 = 172
    RX = 173
    METAG = 174
    MCST_ELBRUS = 175
    ECOG16 = 176
    CR16 = 177
    ETPU = 178
    SLE9X = 179
    L1OM = 180
    INTEL181 = 181
    INTEL182 = 182
    AARCH64 = 183
    RES184 = 184
    AVR32 = 185
    STM8 = 186
    TILE64 = 187
    TILEPRO = 188
    MICROBLAZE = 189
    CUDA = 190
    TILEGX = 191
    CLOUDSHIELD = 192
    COREA_1ST = 193
    COREA_2ND = 194
    ARC_COMPACT2 = 195
    OPEN8 = 196
    RL78 = 197
    VIDEOCORE5 = 198
    R78KOR = 199
    F56800EX = 200
    BA1 = 201
    BA2 = 202
    XCORE = 203
    MCHP_PIC = 204
    INTEL205 = 205
    INTEL206 = 206
    INTEL207 = 207
    INTEL208 = 208
    INTEL209 = 209
    KM32 = 210
    KMX32 = 211
    KMX16 = 212
    KMX8 = 213
    KVARC = 214
    CDP = 215
    COGE = 216
    COOL = 217
    NORC = 218
    CSR_KALIMBA = 219
    Z80 = 220
    VISIUM = 221
    FT32 = 222
    MOXIE = 223
    AMDGPU = 224
    RISCV = 243
    LANAI = 244
    CEVA = 245
    CEVA_X2 = 246
    BPF = 247
    GRAPHCORE_IPU = 248
    IMG1 = 249
    NFP = 250
    CSKY = 252
    ARC_COMPACT3_64 = 253
    MCS6502 = 254
    ARC_COMPACT3 = 255
    KVX = 256
    W65816 = 257
    LOONGARCH = 258
    KF32 = 259
    MT = 0x2530
    ALPHA = 0x9026
    WEBASSEMBLY = 0x4157
    DLX = 0x5AA5
    XSTORMY16 = 0xAD45
    IQ2000 = 0xFEBA
    M32C_OLD = 0xFEB
    NIOS32 = 0xFEBB
    CYGNUS_MEP = 0xF00D
    ADAPTEVA_EPIPHANY = 0x1223
    CYGNUS_FRV = 0x5441
    S12Z = 0x4DEF


class Version(enum.IntEnum):
    """Object file version."""

    NONE = 0
    CURRENT = 1


class IdentIndex(enum.IntEnum):
    """Byte positions within ``e_ident``."""

    MAG0 = 0
    MAG1 = 1
    MAG2 = 2
    MAG3 = 3
    CLASS = 4
    DATA = 5
    VERSION = 6
    OSABI = 7
    ABIVERSION = 8
    PAD = 9
    NIDENT = 16


class ElfClass(enum.IntEnum):
    """Word size of the file."""

    NONE = 0
    ELF32 = 1
    ELF64 = 2


class Encoding(enum.IntEnum):
    """Byte order of the file."""

    NONE = 0
    LSB = 1
    MSB = 2


class OsAbi(enum.IntEnum):
    """Operating system / ABI extensions."""

    NONE = 0
    HPUX = 1
    NETBSD = 2
    LINUX = 3
    HURD = 4
    SOLARIS = 6
    AIX = 7
    IRIX = 8
    FREEBSD = 9
    TRU64 = 10
    MODESTO = 11
    OPENBSD = 12
    OPENVMS = 13
    NSK = 14
    AROS = 15
    FENIXOS = 16
    NUXI = 17
    OPENVOS = 18
    AMDGPU_HSA = 64
    AMDGPU_PAL = 65
    AMDGPU_MESA3D = 66
    ARM = 97
    STANDALONE = 255


def is_elf_magic(data: bytes) -> bool:
    """Return True if ``data`` begins with the ELF magic number."""
    return bytes(data[: len(ELF_MAGIC)]) == ELF_MAGIC


def make_ident(
    elf_class: int,
    encoding: int,
    osabi: int = OsAbi.NONE,
    abi_version: int = 0,
) -> bytes:
    """Build the 16-byte ``e_ident`` array for the given class and encoding."""
    fields = {
        "elf_class": elf_class,
        "encoding": encoding,
        "osabi": osabi,
        "abi_version": abi_version,
    }
    for name, value in fields.items():
        if not 0 <= int(value) <= 0xFF:
            raise ValueError(f"{name} must fit in one byte, got {value}")
    head = ELF_MAGIC + bytes(
        [int(elf_class), int(encoding), Version.CURRENT, int(osabi), int(abi_version)]
    )
    return head.ljust(IdentIndex.NIDENT, b"\0")