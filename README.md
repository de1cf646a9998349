# gbemu

A small Game Boy emulator core. It reads a cartridge ROM and reports what its
header says. It also loads the first two ROM banks into a 64 KiB address
space, sets the CPU registers to their post-boot values with PC at `0x0100`,
and decodes the first opcode it finds there.

## Installing

```
pip install .
```

## Command line

```
gbemu path/to/game.gb
```

The command prints these header lines, one per line:

- the game title
- `nintendo logo works` or `nintendo logo error`
- the region (`region: Japan` or `region: non-Japan`), left out for an unknown code
- the cartridge type in hex
- the ROM size
- the extra cartridge RAM size
- `checksum: fine` or `checksum: false`

Then the CPU fetches the opcode at `0x0100` and prints its mnemonic, or
`undefined func: XX` if it has none. For `LD BC, n16` (`0x01`) it also loads
BC and prints its new value in hex.

Exit status:

- 0 on success.
- 1 if no ROM path is given; a usage line is printed.
- 2 if the file cannot be opened; `invalid filename` is printed.
- 3 if the file is too short to hold a cartridge header.

## Library use

```python
from gbemu.rom import game_title, check_checksum, header_report
from gbemu.cpu import Cpu, describe_opcode

with open("game.gb", "rb") as fh:
    rom = fh.read()

print(game_title(rom))
print(check_checksum(rom))
print(header_report(rom))          # list of report lines

cpu = Cpu(rom)
print(describe_opcode(0x01))       # "LD BC, n16"
print(cpu.step())                  # fetch the next opcode and trace it
cpu.execute(cpu.fetch8())          # fetch and carry out one instruction
print(hex(cpu.registers.pc))
```

### `gbemu.rom`

Header fields, each taking the ROM as bytes:

- `game_title`: the title, with trailing NUL padding removed.
- `logo_valid`: whether the logo bytes are intact.
- `region`: the region, or `None` for an unknown code.
- `cartridge_type`: the raw cartridge type.
- `rom_size`: the declared ROM size, or `None` if unknown.
- `ram_size`: the declared extra RAM, `"none"` if absent, or `None` if unknown.
- `calculate_checksum`: the header checksum computed over `0x0134..0x014C`.
- `check_checksum`: whether that checksum matches the stored one.
- `header_report`: the report lines that the command prints.

Each raises `ValueError` if the ROM is too short to hold the field.

### `gbemu.registers`

- `Registers`: the 8-bit registers `a f b c d e h l`, plus `sp`, `pc`, `ir`
  and `ie`. Values wrap to their width. The pairs `af`, `bc`, `de` and `hl`
  can be read and assigned.
- Flag methods on `Registers`: `set_flag`, `reset_flag` and `has_flag`.
- `Flag`: the `Z`, `N`, `H` and `C` bits of F.
- `half_carry_add` and `half_carry_sub`: the nibble carry and borrow tests.

### `gbemu.memory`

`Memory` is a flat 64 KiB `bytearray` with these methods:

- `load_rom`: copies the first 32 KiB of a ROM to address 0.
- `read`: returns the byte at an address.
- `write`: stores the low 8 bits of a value at an address.

`read` and `write` raise `IndexError` for an address outside the range.

### `gbemu.cpu`

- `Cpu(rom)`: sets up the registers and memory.
- `fetch8` and `fetch16`: read at PC and advance it.
- `execute`: carries out one instruction.
- `read_opcode`: returns the trace line for an opcode. It carries out only `0x01`.
- `step`: fetches one opcode and returns its trace line from `read_opcode`.
- `describe_opcode`: names opcodes `0x00`–`0x0F`.
- `UnsupportedOpcodeError`: raised by `execute` for an opcode it does not implement.

`execute` covers these opcodes:

- `0x00` (NOP) and `0x10`, which sets `cpu.stopped`.
- The 16-bit loads, increments, decrements and `ADD HL, rr`.
- The 8-bit INC, DEC and immediate loads.
- The `[BC]`, `[DE]`, `[HL+]` and `[HL-]` loads and stores.
- RLCA, RLA, RRCA, RRA, CPL, CCF and SCF.
- `LD [a16], SP`.
- The register-to-register loads `0x40`–`0x7F`. `0x76` sets `cpu.halted`.

## What it does not do

This is not yet a playable emulator:

- There is no run loop. The command traces a single opcode.
- There is no display, sound, input, timers or interrupts.
- There is no memory bank switching.
- There are no jumps, calls, returns, stack operations, DAA, arithmetic or
  logic on A, or any opcode from `0x80` up.

## Running the tests

```
pip install .[test]
pytest
```