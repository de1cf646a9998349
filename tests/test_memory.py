import pytest

from gbemu.memory import RAM_SIZE, ROM_BANK00_SIZE, ROM_BANKNN_SIZE, Memory


def test_memory_starts_zeroed_with_full_size():
    mem = Memory()
    assert len(mem.ram) == RAM_SIZE
    assert not any(mem.ram)


def test_load_rom_copies_two_banks_only():
    rom = bytes((i * 7) & 0xFF for i in range(0x9000))
    mem = Memory()
    mem.load_rom(rom)
    banks = ROM_BANK00_SIZE + ROM_BANKNN_SIZE
    assert bytes(mem.ram[:banks]) == rom[:banks]
    assert not any(mem.ram[banks:])


def test_load_short_rom_copies_what_exists():
    mem = Memory()
    mem.load_rom(b"\x01\x02\x03")
    assert mem.read(0) == 1
    assert mem.read(2) == 3
    assert mem.read(3) == 0


def test_write_then_read_round_trip():
    mem = Memory()
    mem.write(0xC000, 0x42)
    assert mem.read(0xC000) == 0x42


def test_write_masks_to_byte():
    mem = Memory()
    mem.write(0xFF80, 0x1FF)
    assert mem.read(0xFF80) == 0xFF
    mem.write(0xFF80, -1)
    assert mem.read(0xFF80) == 0xFF


@pytest.mark.parametrize("address", [-1, RAM_SIZE, RAM_SIZE + 10])
def test_out_of_range_address_raises(address):
    mem = Memory()
    with pytest.raises(IndexError):
        mem.read(address)
    with pytest.raises(IndexError):
        mem.write(address, 0)


def test_last_address_is_usable():
    mem = Memory()
    mem.write(RAM_SIZE - 1, 0x99)
    assert mem.read(RAM_SIZE - 1) == 0x99