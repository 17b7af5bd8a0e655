"""Expression compiler to tree dumps, stack-machine code and IR text, runtime loggers and ELF format definitions."""

__version__ = "0.1.0"