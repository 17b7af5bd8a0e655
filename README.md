# irlab

A small compiler toolkit for arithmetic expressions, plus Python definitions
of the ELF object-file format. It has no dependencies outside the standard
library.

## Expressions

The expression language is:

```
S -> E
E -> T (['+' '-'] E)?
T -> P (['*' '/'] T)?
P -> '(' E ')' | N | F
N -> ['0'-'9']+
F -> ('sin' | 'cos' | 'sqr' | 'sqrt') '(' E ')'
```

Only spaces count as whitespace. Subtraction and division are folded into
the tree: `a - n` becomes `a + (-n)` and `a / n` becomes `a * (1/n)`, applied
to the next number read after the operator. Anything after a complete
expression is ignored.

`irlab.exprparser.parse_expression(text)` (or `Parser(text).parse()`) returns
an `irlab.exprtree.ExpressionTree`. Its `root` is a `Node` whose `kind` is a
`Kind` (`NUMBER`, `ACTION` or `FUNCTION`); `ExpressionTree.nodes()` yields the
nodes in pre-order and `size` counts them. Malformed input raises
`ParseError`, a `ValueError` that carries `position` and `remaining`.

From a tree you can produce:

- an indented in-order dump, one node per line (`irlab.exprprint.dump_tree`)
- fully parenthesised prefix, infix and postfix forms (`prefix_form`,
  `infix_form`, `postfix_form`)
- a program for a simple stack machine (`stack_program`), using `push`,
  `add_s`, `sub_s`, `mul_s`, `div_s` and the function names, ending with
  `pop x1`, `write x1`, `exit`
- LLVM-style IR text (`irlab.exprir.generate_ir`, which returns an `IRModule`
  whose `render()` gives a module `top` with a `main` function). Constant
  additions are folded; function calls get `declare double @name(double)`
  declarations.

Numbers are printed with `format_value`, which uses `%g`.

```python
from irlab.exprparser import parse_expression
from irlab.exprprint import dump_tree, prefix_form, infix_form, postfix_form, stack_program
from irlab.exprir import generate_ir

tree = parse_expression("2 * (3 + 4) - sqrt(16)")
print(dump_tree(tree))
print(prefix_form(tree))
print(infix_form(tree))
print(postfix_form(tree))
print(stack_program(tree))
print(generate_ir(tree).render())
```

### Command line

```
irlab-expr expression.txt
```

reads the first line of the file, echoes it, prints the tree dump and the IR,
and writes `expression_check.txt` (prefix, infix and postfix forms, one per
line) and `expr.s` (the stack-machine program) into the current directory.
It exits with status 1 when the argument is missing, the file cannot be read
or the expression does not parse.

## Runtime loggers

`irlab.loggers` holds logging hooks for instrumented programs:
`func_start_logger`, `call_logger`, `func_end_logger` and `bin_opt_logger`.
Each writes one `[LOG] ...` line to the stream it is given, or to standard
output when no stream is passed.

```python
from irlab.loggers import bin_opt_logger

bin_opt_logger(7, 3, 4, "add", "main", 1)
# [LOG] In function 'main': 7 = 3 add 4 {1}
```

## ELF definitions

`irlab.elf` describes the ELF format:

- `irlab.elf.ident`: `FileType`, `Machine`, `Version`, `IdentIndex`,
  `ElfClass`, `Encoding`, `OsAbi`, with `is_elf_magic` and `make_ident`
- `irlab.elf.sections`: `SectionIndex`, `SectionType`, `SectionFlag`,
  `GroupFlag`, `SymbolBinding`, `SymbolType`, `SymbolVisibility`, with
  `st_bind`, `st_type`, `st_info` and `st_visibility`
- `irlab.elf.relocations`: `I386Reloc`, `X8664Reloc`, `AmdgpuReloc`,
  `Aarch64Reloc`, with `r32_sym`, `r32_type`, `r32_info` and the 64-bit
  `r64_sym`, `r64_type`, `r64_info`
- `irlab.elf.notes`: note types by owner (`CoreNote`, `LinuxNote`,
  `FreeBsdNote`, `NetBsdNote`, `OpenBsdNote`, `ObjectNote`, `GnuNote`),
  chosen from a note name with `note_types_for`
- `irlab.elf.dynamic`: `SegmentType`, `SegmentFlag`, `DynamicTag`,
  `DynamicFlag`, `AuxType`
- `irlab.elf.amdgpu`: `AmdgpuFeature`, `AmdgpuMach`, with `amdgpu_mach`,
  `is_r600` and `is_amdgcn`
- `irlab.elf.structs`: `FileHeader`, `SectionHeader`, `ProgramHeader`,
  `Symbol`, `Relocation`, `DynamicEntry`, `VersionNeed`, `VersionNeedAux`,
  `AuxEntry` and `CompressionHeader`, which `unpack` from and `pack` to bytes
  for 32- and 64-bit files of either byte order

```python
from irlab.elf.ident import ElfClass, Encoding, Machine, is_elf_magic, make_ident
from irlab.elf.structs import FileHeader

ident = make_ident(ElfClass.ELF64, Encoding.LSB)
assert is_elf_magic(ident)

header = FileHeader(e_ident=ident, e_machine=Machine.X86_64)
data = header.pack(ElfClass.ELF64, little_endian=True)
assert len(data) == FileHeader.size(ElfClass.ELF64)
assert FileHeader.unpack(data, ElfClass.ELF64, True) == header
```

## What it does not do

- The IR is text only: nothing here compiles, verifies or runs it.
- The ELF part defines constants and single records; there is no reader or
  writer for whole ELF files (no section, symbol-table or string-table
  access, no hash lookups).

## Tests

```
pip install -e ".[test]"
pytest
```