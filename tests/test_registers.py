import pytest

from gbemu.registers import Flag, Registers, half_carry_add, half_carry_sub


@pytest.mark.parametrize(
    "flag, bit",
    [(Flag.Z, 1 << 7), (Flag.N, 1 << 6), (Flag.H, 1 << 5), (Flag.C, 1 << 4)],
)
def test_flag_bits_match_f_layout(flag, bit):
    regs = Registers()
    regs.set_flag(flag)
    assert regs.f == bit
    assert regs.af == bit


def test_defaults_are_zero():
    regs = Registers()
    assert (regs.af, regs.bc, regs.de, regs.hl, regs.sp, regs.pc) == (0, 0, 0, 0, 0, 0)


@pytest.mark.parametrize(
    "pair, high, low",
    [("af", "a", "f"), ("bc", "b", "c"), ("de", "d", "e"), ("hl", "h", "l")],
)
def test_pair_round_trip(pair, high, low):
    regs = Registers()
    setattr(regs, pair, 0x1234)
    assert getattr(regs, high) == 0x12
    assert getattr(regs, low) == 0x34
    assert getattr(regs, pair) == 0x1234


def test_pair_built_from_halves():
    regs = Registers(b=0xAB, c=0xCD)
    assert regs.bc == 0xABCD


def test_eight_bit_wraps():
    regs = Registers(b=0xFF)
    regs.b += 1
    assert regs.b == 0
    regs.c -= 1
    assert regs.c == 0xFF


def test_sixteen_bit_wraps():
    regs = Registers(sp=0xFFFF)
    regs.sp += 1
    assert regs.sp == 0
    regs.hl -= 1
    assert regs.hl == 0xFFFF
    assert regs.h == 0xFF and regs.l == 0xFF


def test_set_reset_flags():
    regs = Registers()
    regs.set_flag(Flag.Z)
    regs.set_flag(Flag.C)
    assert regs.has_flag(Flag.Z)
    assert regs.has_flag(Flag.C)
    assert not regs.has_flag(Flag.N)
    regs.reset_flag(Flag.Z)
    assert not regs.has_flag(Flag.Z)
    assert regs.f == int(Flag.C)


def test_reset_leaves_other_bits():
    regs = Registers(f=0xFF)
    regs.reset_flag(Flag.H)
    assert regs.f == 0xFF & ~int(Flag.H)


@pytest.mark.parametrize(
    "value, operand, expected",
    [(0x0F, 1, True), (0x0E, 1, False), (0x08, 0x08, True), (0xF0, 0x0F, False)],
)
def test_half_carry_add(value, operand, expected):
    assert half_carry_add(value, operand) is expected


@pytest.mark.parametrize(
    "value, operand, expected",
    [(0x10, 1, True), (0x01, 1, False), (0x00, 1, True), (0x0F, 0x0F, False)],
)
def test_half_carry_sub(value, operand, expected):
    assert half_carry_sub(value, operand) is expected