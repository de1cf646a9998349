"""Command line entry point: inspect a cartridge and trace its first opcode."""

import sys

from .cpu import Cpu
from .rom import header_report


def print_info(rom) -> None:
    """Print the cartridge header report."""
    for line in header_report(rom):
        print(line)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: gbemu <romFile>")
        return 1
    try:
        with open(args[0], "rb") as handle:
            rom = handle.read()
    except OSError:
        print("invalid filename")
        return 2
    try:
        print_info(rom)
    except ValueError as error:
        print(error)
        return 3
    cpu = Cpu(rom)
    print(cpu.step())
    return 0


if __name__ == "__main__":
    sys.exit(main())