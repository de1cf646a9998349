"""Game Boy emulator core: cartridge header inspection, memory, registers and an early CPU."""

__version__ = "0.1.0"
__all__ = ["cli", "cpu", "memory", "registers", "rom"]