"""Cartridge header inspection."""

NINTENDO_LOGO_START = 0x0104
NINTENDO_LOGO_END = 0x0133
TITLE_START = 0x0134
TITLE_END = 0x0143
CARTRIDGE_TYPE_ADDRESS = 0x0147
ROM_SIZE_ADDRESS = 0x0148
RAM_SIZE_ADDRESS = 0x0149
REGION_ADDRESS = 0x014A
HEADER_CHECKSUM = 0x014D
CHECKSUM_START = 0x0134
CHECKSUM_END = 0x014C

NINTENDO_LOGO = bytes(
    [
        0xCE, 0xED, 0x66, 0x66, 0xCC, 0x0D, 0x00, 0x0B,
        0x03, 0x73, 0x00, 0x83, 0x00, 0x0C, 0x00, 0x0D,
        0x00, 0x08, 0x11, 0x1F, 0x88, 0x89, 0x00, 0x0E,
        0xDC, 0xCC, 0x6E, 0xE6, 0xDD, 0xDD, 0xD9, 0x99,
        0xBB, 0xBB, 0x67, 0x63, 0x6E, 0x0E, 0xEC, 0xCC,
        0xDD, 0xDC, 0x99, 0x9F, 0xBB, 0xB9, 0x33, 0x3E,
    ]
)

_ROM_SIZES = {
    0x00: "32kib",
    0x01: "64kib",
    0x02: "128kib",
    0x03: "256kib",
    0x04: "512kib",
    0x05: "1mb",
    0x06: "2mb",
    0x07: "4mb",
    0x08: "8mb",
}

_RAM_SIZES = {
    0x00: "none",
    0x01: "none",
    0x02: "8kb",
    0x03: "32kb",
    0x04: "128kb",
    0x05: "64kb",
}

_REGIONS = {0x00: "Japan", 0x01: "non-Japan"}


def _require(rom, last_address: int) -> None:
    if len(rom) <= last_address:
        raise ValueError(
            f"ROM of {len(rom)} bytes is too short for the cartridge header"
        )


def game_title(rom) -> str:
    """Title stored in the header, without trailing padding."""
    _require(rom, TITLE_END)
    return bytes(rom[TITLE_START : TITLE_END + 1]).decode("latin-1").rstrip("\x00")


def logo_valid(rom) -> bool:
    """True if the header carries the expected boot logo."""
    _require(rom, NINTENDO_LOGO_END)
    return bytes(rom[NINTENDO_LOGO_START : NINTENDO_LOGO_END + 1]) == NINTENDO_LOGO


def region(rom) -> str | None:
    """Destination region, or None for an unknown code."""
    _require(rom, REGION_ADDRESS)
    return _REGIONS.get(rom[REGION_ADDRESS])


def cartridge_type(rom) -> int:
    """Raw cartridge type code."""
    _require(rom, CARTRIDGE_TYPE_ADDRESS)
    return rom[CARTRIDGE_TYPE_ADDRESS]


def rom_size(rom) -> str | None:
    """Declared ROM size, or None for an unknown code."""
    _require(rom, ROM_SIZE_ADDRESS)
    return _ROM_SIZES.get(rom[ROM_SIZE_ADDRESS])


def ram_size(rom) -> str | None:
    """Declared extra cartridge RAM ("none" if absent), or None if unknown."""
    _require(rom, RAM_SIZE_ADDRESS)
    return _RAM_SIZES.get(rom[RAM_SIZE_ADDRESS])


def calculate_checksum(rom) -> int:
    """Header checksum computed over 0x0134..0x014C."""
    _require(rom, CHECKSUM_END)
    checksum = 0
    for byte in rom[CHECKSUM_START : CHECKSUM_END + 1]:
        checksum = (checksum - byte - 1) & 0xFF
    return checksum


def check_checksum(rom) -> bool:
    """True if the stored header checksum matches the computed one."""
    _require(rom, HEADER_CHECKSUM)
    return rom[HEADER_CHECKSUM] == calculate_checksum(rom)


def header_report(rom) -> list[str]:
    """Human-readable lines describing the cartridge header."""
    _require(rom, HEADER_CHECKSUM)
    lines = [game_title(rom)]
    lines.append("nintendo logo works" if logo_valid(rom) else "nintendo logo error")
    destination = region(rom)
    if destination is not None:
        lines.append(f"region: {destination}")
    lines.append(f"Cartridge type: {cartridge_type(rom):02X}")
    size = rom_size(rom)
    lines.append(f"rom size: {size}" if size is not None else "")
    extra = ram_size(rom)
    if extra is None:
        lines.append("")
    elif extra == "none":
        lines.append("no additional ram")
    else:
        lines.append(f"additional ram: {extra}")
    lines.append("checksum: fine" if check_checksum(rom) else "checksum: false")
    return lines