from gbemu import rom as header
from gbemu.cli import main, print_info


def build_rom(title=b"TEST"):
    data = bytearray(0x8000)
    data[header.NINTENDO_LOGO_START : header.NINTENDO_LOGO_END + 1] = header.NINTENDO_LOGO
    data[header.TITLE_START : header.TITLE_START + len(title)] = title
    data[header.HEADER_CHECKSUM] = header.calculate_checksum(data)
    return bytes(data)


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_main_with_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.gb")]) == 2
    assert "invalid filename" in capsys.readouterr().out


def test_main_with_valid_rom(tmp_path, capsys):
    path = tmp_path / "game.gb"
    path.write_bytes(build_rom())
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "TEST"
    assert "nintendo logo works" in out
    assert "checksum: fine" in out
    assert out[-1] == "nop"


def test_main_with_truncated_rom(tmp_path):
    path = tmp_path / "short.gb"
    path.write_bytes(b"\x00" * 0x40)
    assert main([str(path)]) == 3


def test_print_info_matches_header_report(capsys):
    data = build_rom(b"HELLO")
    print_info(data)
    assert capsys.readouterr().out.splitlines() == header.header_report(data)