"""Flat 64 KiB address space of the emulated machine."""

RAM_SIZE = 0x10000
ROM_BANK00_SIZE = 0x4000
ROM_BANKNN_SIZE = 0x4000

ROM_BANK00_START = 0x0000
ROM_BANK00_END = 0x3FFF
ROM_BANK01_START = 0x4000
ROM_BANK01_END = 0x7FFF
VRAM_START = 0x8000
VRAM_END = 0x9FFF
SRAM_START = 0xA000
SRAM_END = 0xBFFF
WRAM_START = 0xC000
WRAM_END = 0xDFFF
ECHO_RAM_START = 0xE000
ECHO_RAM_END = 0xFDFF
OAM_START = 0xFE00
OAM_END = 0xFE9F
HRAM_START = 0xFF80
HRAM_END = 0xFFFE

VRAM_SIZE = VRAM_END - VRAM_START + 1
WRAM_SIZE = WRAM_END - WRAM_START + 1
HRAM_SIZE = HRAM_END - HRAM_START + 1
OAM_SIZE = OAM_END - OAM_START + 1


class Memory:
    """Byte-addressable memory covering the whole 16-bit address range."""

    def __init__(self) -> None:
        self.ram = bytearray(RAM_SIZE)

    def load_rom(self, rom) -> None:
        """Copy the first two ROM banks of ``rom`` to the start of memory."""
        data = bytes(rom[: ROM_BANK00_SIZE + ROM_BANKNN_SIZE])
        self.ram[: len(data)] = data

    def read(self, address: int) -> int:
        """Return the byte stored at ``address``."""
        self._check(address)
        return self.ram[address]

    def write(self, address: int, value: int) -> None:
        """Store the low eight bits of ``value`` at ``address``."""
        self._check(address)
        self.ram[address] = value & 0xFF

    @staticmethod
    def _check(address: int) -> None:
        if not 0 <= address < RAM_SIZE:
            raise IndexError(f"address {address:#x} outside memory")