"""Instruction decoding and execution for the emulated CPU."""

from .memory import Memory
from .registers import Flag, Registers, half_carry_add, half_carry_sub

_MNEMONICS = {
    0x00: "nop",
    0x01: "LD BC, n16",
    0x02: "LD [BC], A",
    0x03: "INC BC",
    0x04: "INC B",
    0x05: "DEC B",
    0x06: "LD B, n8",
    0x07: "RLCA",
    0x08: "LD [a16], SP",
    0x09: "ADD HL BC",
    0x0A: "LD A [BC]",
    0x0B: "DEC BC",
    0x0C: "INC C",
    0x0D: "DEC C",
    0x0E: "LD, C, n8",
    0x0F: "RRCA",
}

# Operand order used by the opcode encoding; index 6 is the byte at [HL].
_R8 = ("b", "c", "d", "e", "h", "l", None, "a")
_R16 = ("bc", "de", "hl", "sp")
_AT_HL = 6


class UnsupportedOpcodeError(ValueError):
    """Raised when an opcode has no implementation."""

    def __init__(self, opcode: int) -> None:
        super().__init__(f"unsupported opcode {opcode:02X}")
        self.opcode = opcode


def describe_opcode(opcode: int) -> str:
    """Mnemonic of ``opcode``, or a note that it is undefined."""
    return _MNEMONICS.get(opcode, f"undefined func: {opcode:02X}")


class Cpu:
    """CPU state after the boot sequence, with a ROM mapped into memory."""

    def __init__(self, rom) -> None:
        self.registers = Registers(
            a=0x01,
            f=0x00,
            b=0x00,
            c=0x13,
            d=0x00,
            e=0xD8,
            h=0x01,
            l=0x4D,
            pc=0x0100,
            sp=0xFFFE,
        )
        self.set_flag(Flag.Z)
        self.memory = Memory()
        self.memory.load_rom(rom)
        self.halted = False
        self.stopped = False

    def set_flag(self, flag: Flag) -> None:
        self.registers.set_flag(flag)

    def reset_flag(self, flag: Flag) -> None:
        self.registers.reset_flag(flag)

    def _put_flag(self, flag: Flag, condition: bool) -> None:
        if condition:
            self.set_flag(flag)
        else:
            self.reset_flag(flag)

    def fetch8(self) -> int:
        """Read the byte at PC and advance PC."""
        regs = self.registers
        value = self.memory.read(regs.pc)
        regs.pc += 1
        return value

    def fetch16(self) -> int:
        """Read a little-endian word at PC and advance PC by two."""
        low = self.fetch8()
        high = self.fetch8()
        return (high << 8) | low

    def _get8(self, index: int) -> int:
        if index == _AT_HL:
            return self.memory.read(self.registers.hl)
        return getattr(self.registers, _R8[index])

    def _set8(self, index: int, value: int) -> None:
        if index == _AT_HL:
            self.memory.write(self.registers.hl, value)
        else:
            setattr(self.registers, _R8[index], value)

    def _get16(self, index: int) -> int:
        return getattr(self.registers, _R16[index])

    def _set16(self, index: int, value: int) -> None:
        setattr(self.registers, _R16[index], value & 0xFFFF)

    def _carry(self) -> int:
        return int(self.registers.has_flag(Flag.C))

    def _inc8(self, index: int) -> None:
        value = self._get8(index)
        self._put_flag(Flag.H, half_carry_add(value, 1))
        result = (value + 1) & 0xFF
        self._set8(index, result)
        self._put_flag(Flag.Z, result == 0)
        self.reset_flag(Flag.N)

    def _dec8(self, index: int) -> None:
        value = self._get8(index)
        self._put_flag(Flag.H, half_carry_sub(value, 1))
        result = (value - 1) & 0xFF
        self._set8(index, result)
        self._put_flag(Flag.Z, result == 0)
        self.set_flag(Flag.N)

    def _add_hl(self, operand: int) -> None:
        regs = self.registers
        hl = regs.hl
        self._put_flag(Flag.C, hl + operand > 0xFFFF)
        self._put_flag(Flag.H, (hl & 0x0FFF) + (operand & 0x0FFF) > 0x0FFF)
        regs.hl = hl + operand
        self.reset_flag(Flag.N)

    def _rotate_flags(self, carry_out: int) -> None:
        self.reset_flag(Flag.Z)
        self.reset_flag(Flag.N)
        self.reset_flag(Flag.H)
        self._put_flag(Flag.C, bool(carry_out))

    def _rlca(self) -> None:
        regs = self.registers
        bit7 = regs.a >> 7
        regs.a = (regs.a << 1) | bit7
        self._rotate_flags(bit7)

    def _rla(self) -> None:
        regs = self.registers
        bit7 = regs.a >> 7
        regs.a = (regs.a << 1) | self._carry()
        self._rotate_flags(bit7)

    def _rrca(self) -> None:
        regs = self.registers
        bit0 = regs.a & 1
        regs.a = (regs.a >> 1) | (bit0 << 7)
        self._rotate_flags(bit0)

    def _rra(self) -> None:
        regs = self.registers
        carry = self._carry()
        bit0 = regs.a & 1
        regs.a = (regs.a >> 1) | (carry << 7)
        self._rotate_flags(bit0)

    def _cpl(self) -> None:
        self.registers.a = ~self.registers.a
        self.set_flag(Flag.N)
        self.set_flag(Flag.H)

    def _ccf(self) -> None:
        self.reset_flag(Flag.N)
        self.reset_flag(Flag.H)
        self._put_flag(Flag.C, not self._carry())

    def _scf(self) -> None:
        self.reset_flag(Flag.N)
        self.reset_flag(Flag.H)
        self.set_flag(Flag.C)

    def _store_sp(self) -> None:
        address = self.fetch16()
        sp = self.registers.sp
        self.memory.write(address, sp & 0xFF)
        self.memory.write((address + 1) & 0xFFFF, sp >> 8)

    def _indirect_address(self, row: int) -> int:
        """Address for the [BC], [DE], [HL+], [HL-] column; adjusts HL."""
        regs = self.registers
        if row == 0:
            return regs.bc
        if row == 1:
            return regs.de
        address = regs.hl
        regs.hl = address + 1 if row == 2 else address - 1
        return address

    def execute(self, opcode: int) -> None:
        """Carry out one instruction whose opcode has already been fetched."""
        if 0x40 <= opcode <= 0x7F:
            self._execute_load(opcode)
        elif 0x00 <= opcode <= 0x3F:
            self._execute_low(opcode)
        else:
            raise UnsupportedOpcodeError(opcode)

    def _execute_load(self, opcode: int) -> None:
        if opcode == 0x76:
            self.halted = True
            return
        destination = (opcode >> 3) & 7
        source = opcode & 7
        if opcode == 0x6F:
            source = _R8.index("b")
        self._set8(destination, self._get8(source))

    def _execute_low(self, opcode: int) -> None:
        row = opcode >> 4
        column = opcode & 0x0F
        r8 = (opcode >> 3) & 7
        regs = self.registers

        if column == 0x0:
            if opcode == 0x00:
                return
            if opcode == 0x10:
                self.stopped = True
                return
            raise UnsupportedOpcodeError(opcode)
        if column == 0x1:
            self._set16(row, self.fetch16())
        elif column == 0x2:
            self.memory.write(self._indirect_address(row), regs.a)
        elif column == 0x3:
            self._set16(row, self._get16(row) + 1)
        elif column in (0x4, 0xC):
            self._inc8(r8)
        elif column in (0x5, 0xD):
            self._dec8(r8)
        elif column in (0x6, 0xE):
            self._set8(r8, self.fetch8())
        elif column == 0x7:
            if opcode == 0x27:
                raise UnsupportedOpcodeError(opcode)
            {0x07: self._rlca, 0x17: self._rla, 0x37: self._scf}[opcode]()
        elif column == 0x8:
            if opcode != 0x08:
                raise UnsupportedOpcodeError(opcode)
            self._store_sp()
        elif column == 0x9:
            self._add_hl(self._get16(row))
        elif column == 0xA:
            regs.a = self.memory.read(self._indirect_address(row))
        elif column == 0xB:
            self._set16(row, self._get16(row) - 1)
        elif column == 0xF:
            {0x0F: self._rrca, 0x1F: self._rra, 0x2F: self._cpl, 0x3F: self._ccf}[
                opcode
            ]()

    def read_opcode(self, opcode: int) -> str:
        """Decode ``opcode`` into a trace line; only LD BC, n16 is carried out."""
        line = describe_opcode(opcode)
        if opcode == 0x01:
            self.execute(opcode)
            line = f"{line} {self.registers.bc:x}"
        return line

    def step(self) -> str:
        """Fetch the next opcode and trace it."""
        return self.read_opcode(self.fetch8())