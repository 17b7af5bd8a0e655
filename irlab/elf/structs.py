"""Binary ELF records: headers, symbols, relocations and the like.

Each record packs to and unpacks from the on-disk layout for a given
word size (:class:`~irlab.elf.ident.ElfClass`) and byte order.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .ident import ElfClass, IdentIndex
from .sections import st_bind, st_type

_T = TypeVar("_T")

_Layout = tuple[str, tuple[str, ...]]


def _layout(elf_class: int, layouts: dict[ElfClass, _Layout]) -> _Layout:
    try:
        return layouts[ElfClass(elf_class)]
    except (ValueError, KeyError):
        raise ValueError(f"unsupported ELF class: {elf_class!r}") from None


def _codec(fmt: str, little_endian: bool) -> struct.Struct:
    return struct.Struct(("<" if little_endian else ">") + fmt)


def _unpack(cls: type[_T], layout: _Layout, data: Any, little_endian: bool) -> _T:
    fmt, fields = layout
    codec = _codec(fmt, little_endian)
    view = memoryview(data)
    if len(view) < codec.size:
        raise ValueError(
            f"{cls.__name__} needs {codec.size} bytes, got {len(view)}"
        )
    return cls(**dict(zip(fields, codec.unpack_from(view))))


def _pack(record: Any, layout: _Layout, little_endian: bool) -> bytes:
    fmt, fields = layout
    try:
        return _codec(fmt, little_endian).pack(*(getattr(record, f) for f in fields))
    except struct.error as exc:
        raise ValueError(f"cannot pack {type(record).__name__}: {exc}") from None


def _size(layout: _Layout) -> int:
    return struct.calcsize("<" + layout[0])


_EHDR_FIELDS_TAIL = (
    "e_type",
    "e_machine",
    "e_version",
    "e_entry",
    "e_phoff",
    "e_shoff",
    "e_flags",
    "e_ehsize",
    "e_phentsize",
    "e_phnum",
    "e_shentsize",
    "e_shnum",
    "e_shstrndx",
)
_EHDR: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("16sHHIIIIIHHHHHH", ("e_ident",) + _EHDR_FIELDS_TAIL),
    ElfClass.ELF64: ("16sHHIQQQIHHHHHH", ("e_ident",) + _EHDR_FIELDS_TAIL),
}


@dataclass
class FileHeader:
    """ELF file header."""

    e_ident: bytes = bytes(IdentIndex.NIDENT)
    e_type: int = 0
    e_machine: int = 0
    e_version: int = 0
    e_entry: int = 0
    e_phoff: int = 0
    e_shoff: int = 0
    e_flags: int = 0
    e_ehsize: int = 0
    e_phentsize: int = 0
    e_phnum: int = 0
    e_shentsize: int = 0
    e_shnum: int = 0
    e_shstrndx: int = 0

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of the header for ``elf_class``."""
        return _size(_layout(elf_class, _EHDR))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> FileHeader:
        """Read a header from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _EHDR), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the header as bytes."""
        if len(self.e_ident) != IdentIndex.NIDENT:
            raise ValueError(
                f"e_ident must be {int(IdentIndex.NIDENT)} bytes, got {len(self.e_ident)}"
            )
        return _pack(self, _layout(elf_class, _EHDR), little_endian)


_SHDR_FIELDS = (
    "sh_name",
    "sh_type",
    "sh_flags",
    "sh_addr",
    "sh_offset",
    "sh_size",
    "sh_link",
    "sh_info",
    "sh_addralign",
    "sh_entsize",
)
_SHDR: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("IIIIIIIIII", _SHDR_FIELDS),
    ElfClass.ELF64: ("IIQQQQIIQQ", _SHDR_FIELDS),
}


@dataclass
class SectionHeader:
    """Section header table entry."""

    sh_name: int = 0
    sh_type: int = 0
    sh_flags: int = 0
    sh_addr: int = 0
    sh_offset: int = 0
    sh_size: int = 0
    sh_link: int = 0
    sh_info: int = 0
    sh_addralign: int = 0
    sh_entsize: int = 0

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of an entry for ``elf_class``."""
        return _size(_layout(elf_class, _SHDR))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> SectionHeader:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _SHDR), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _layout(elf_class, _SHDR), little_endian)


_PHDR: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: (
        "IIIIIIII",
        ("p_type", "p_offset", "p_vaddr", "p_paddr", "p_filesz", "p_memsz", "p_flags", "p_align"),
    ),
    ElfClass.ELF64: (
        "IIQQQQQQ",
        ("p_type", "p_flags", "p_offset", "p_vaddr", "p_paddr", "p_filesz", "p_memsz", "p_align"),
    ),
}


@dataclass
class ProgramHeader:
    """Program header (segment) table entry."""

    p_type: int = 0
    p_flags: int = 0
    p_offset: int = 0
    p_vaddr: int = 0
    p_paddr: int = 0
    p_filesz: int = 0
    p_memsz: int = 0
    p_align: int = 0

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of an entry for ``elf_class``."""
        return _size(_layout(elf_class, _PHDR))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> ProgramHeader:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _PHDR), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _layout(elf_class, _PHDR), little_endian)


_SYM: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: (
        "IIIBBH",
        ("st_name", "st_value", "st_size", "st_info", "st_other", "st_shndx"),
    ),
    ElfClass.ELF64: (
        "IBBHQQ",
        ("st_name", "st_info", "st_other", "st_shndx", "st_value", "st_size"),
    ),
}


@dataclass
class Symbol:
    """Symbol table entry."""

    st_name: int = 0
    st_value: int = 0
    st_size: int = 0
    st_info: int = 0
    st_other: int = 0
    st_shndx: int = 0

    @property
    def bind(self) -> int:
        """Binding stored in ``st_info``."""
        return st_bind(self.st_info)

    @property
    def type(self) -> int:
        """Type stored in ``st_info``."""
        return st_type(self.st_info)

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of an entry for ``elf_class``."""
        return _size(_layout(elf_class, _SYM))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> Symbol:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _SYM), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _layout(elf_class, _SYM), little_endian)


_REL_FIELDS = ("r_offset", "r_info")
_RELA_FIELDS = ("r_offset", "r_info", "r_addend")
_REL: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("II", _REL_FIELDS),
    ElfClass.ELF64: ("QQ", _REL_FIELDS),
}
_RELA: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("IIi", _RELA_FIELDS),
    ElfClass.ELF64: ("QQq", _RELA_FIELDS),
}


def _reloc_layout(elf_class: int, with_addend: bool) -> _Layout:
    return _layout(elf_class, _RELA if with_addend else _REL)


@dataclass
class Relocation:
    """Relocation entry, with or without an explicit addend."""

    r_offset: int = 0
    r_info: int = 0
    r_addend: int = 0

    @classmethod
    def size(cls, elf_class: int, with_addend: bool = False) -> int:
        """Size in bytes of an entry for ``elf_class``."""
        return _size(_reloc_layout(elf_class, with_addend))

    @classmethod
    def unpack(
        cls, data: Any, elf_class: int, little_endian: bool, with_addend: bool = False
    ) -> Relocation:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _reloc_layout(elf_class, with_addend), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool, with_addend: bool = False) -> bytes:
        """Return the entry as bytes; the addend is dropped without ``with_addend``."""
        return _pack(self, _reloc_layout(elf_class, with_addend), little_endian)


_DYN: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("iI", ("d_tag", "d_val")),
    ElfClass.ELF64: ("qQ", ("d_tag", "d_val")),
}


@dataclass
class DynamicEntry:
    """Dynamic section entry; ``d_val`` holds either a value or an address."""

    d_tag: int = 0
    d_val: int = 0

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of an entry for ``elf_class``."""
        return _size(_layout(elf_class, _DYN))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> DynamicEntry:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _DYN), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _layout(elf_class, _DYN), little_endian)


_VERNEED: _Layout = ("HHIII", ("vn_version", "vn_cnt", "vn_file", "vn_aux", "vn_next"))
_VERNAUX: _Layout = (
    "IHHII",
    ("vna_hash", "vna_flags", "vna_other", "vna_name", "vna_next"),
)


@dataclass
class VersionNeed:
    """Version dependency entry; the same layout for both classes."""

    vn_version: int = 0
    vn_cnt: int = 0
    vn_file: int = 0
    vn_aux: int = 0
    vn_next: int = 0

    SIZE = _size(_VERNEED)

    @classmethod
    def unpack(cls, data: Any, little_endian: bool) -> VersionNeed:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _VERNEED, data, little_endian)

    def pack(self, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _VERNEED, little_endian)


@dataclass
class VersionNeedAux:
    """Auxiliary version dependency entry; the same layout for both classes."""

    vna_hash: int = 0
    vna_flags: int = 0
    vna_other: int = 0
    vna_name: int = 0
    vna_next: int = 0

    SIZE = _size(_VERNAUX)

    @classmethod
    def unpack(cls, data: Any, little_endian: bool) -> VersionNeedAux:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _VERNAUX, data, little_endian)

    def pack(self, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _VERNAUX, little_endian)


_AUXV: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("II", ("a_type", "a_val")),
    ElfClass.ELF64: ("QQ", ("a_type", "a_val")),
}


@dataclass
class AuxEntry:
    """Auxiliary vector entry passed to a program when it is loaded."""

    a_type: int = 0
    a_val: int = 0

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of an entry for ``elf_class``."""
        return _size(_layout(elf_class, _AUXV))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> AuxEntry:
        """Read an entry from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _AUXV), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the entry as bytes."""
        return _pack(self, _layout(elf_class, _AUXV), little_endian)


_CHDR: dict[ElfClass, _Layout] = {
    ElfClass.ELF32: ("III", ("ch_type", "ch_size", "ch_addralign")),
    ElfClass.ELF64: ("IIQQ", ("ch_type", "ch_reserved", "ch_size", "ch_addralign")),
}


@dataclass
class CompressionHeader:
    """Header at the start of a compressed section.

    ``ch_reserved`` exists only in the 64-bit layout.
    """

    ch_type: int = 0
    ch_size: int = 0
    ch_addralign: int = 0
    ch_reserved: int = field(default=0)

    @classmethod
    def size(cls, elf_class: int) -> int:
        """Size in bytes of the header for ``elf_class``."""
        return _size(_layout(elf_class, _CHDR))

    @classmethod
    def unpack(cls, data: Any, elf_class: int, little_endian: bool) -> CompressionHeader:
        """Read a header from the start of ``data``."""
        return _unpack(cls, _layout(elf_class, _CHDR), data, little_endian)

    def pack(self, elf_class: int, little_endian: bool) -> bytes:
        """Return the header as bytes."""
        return _pack(self, _layout(elf_class, _CHDR), little_endian)