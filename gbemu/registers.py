"""CPU register file and flag helpers."""

from dataclasses import dataclass
from enum import IntFlag


class Flag(IntFlag):
    """Bits of the F register."""

    Z = 1 << 7
    N = 1 << 6
    H = 1 << 5
    C = 1 << 4


_EIGHT_BIT = frozenset({"a", "f", "b", "c", "d", "e", "h", "l", "ir", "ie"})
_SIXTEEN_BIT = frozenset({"sp", "pc"})


def half_carry_add(value: int, operand: int) -> bool:
    """True if adding ``operand`` to ``value`` carries out of bit 3."""
    return (value & 0x0F) + (operand & 0x0F) > 0x0F


def half_carry_sub(value: int, operand: int) -> bool:
    """True if subtracting ``operand`` from ``value`` borrows from bit 4."""
    return (value & 0x0F) < (operand & 0x0F)


@dataclass
class Registers:
    """Eight-bit registers, their 16-bit pairs, SP and PC; values wrap."""

    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    sp: int = 0
    pc: int = 0
    ir: int = 0
    ie: int = 0

    def __setattr__(self, name, value):
        if name in _EIGHT_BIT:
            value &= 0xFF
        elif name in _SIXTEEN_BIT:
            value &= 0xFFFF
        super().__setattr__(name, value)

    @property
    def af(self) -> int:
        return (self.a << 8) | self.f

    @af.setter
    def af(self, value: int) -> None:
        self.a = value >> 8
        self.f = value

    @property
    def bc(self) -> int:
        return (self.b << 8) | self.c

    @bc.setter
    def bc(self, value: int) -> None:
        value &= 0xFFFF
        self.b = value >> 8
        self.c = value

    @property
    def de(self) -> int:
        return (self.d << 8) | self.e

    @de.setter
    def de(self, value: int) -> None:
        value &= 0xFFFF
        self.d = value >> 8
        self.e = value

    @property
    def hl(self) -> int:
        return (self.h << 8) | self.l

    @hl.setter
    def hl(self, value: int) -> None:
        value &= 0xFFFF
        self.h = value >> 8
        self.l = value

    def set_flag(self, flag: Flag) -> None:
        self.f |= int(flag)

    def reset_flag(self, flag: Flag) -> None:
        self.f &= ~int(flag)

    def has_flag(self, flag: Flag) -> bool:
        return bool(self.f & int(flag))