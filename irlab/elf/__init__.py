"""Constants, helpers and record layouts of the ELF object-file format."""