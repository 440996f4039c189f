import pytest

from scetrace.hexfile import open_file, save_file


def test_round_trip_bytes(tmp_path):
    path = tmp_path / "trace.txt"
    payload = bytes(range(256))
    save_file(path, payload.hex())
    assert open_file(path) == payload


def test_save_writes_text(tmp_path):
    path = tmp_path / "out.txt"
    save_file(path, "first line\nsecond line")
    assert path.read_text(encoding="utf-8") == "first line\nsecond line"


def test_save_replaces_contents(tmp_path):
    path = tmp_path / "out.txt"
    save_file(path, "long original contents")
    save_file(path, "short")
    assert path.read_text(encoding="utf-8") == "short"


def test_mixed_case_blank_lines_and_odd_digit(tmp_path):
    path = tmp_path / "dump.txt"
    path.write_text("A0b1\n\nff0\n", encoding="utf-8")
    assert open_file(path) == bytes([0xA0, 0xB1, 0xFF])


def test_crlf_lines(tmp_path):
    path = tmp_path / "dump.txt"
    path.write_bytes(b"0102\r\n0304\r\n")
    assert open_file(path) == b"\x01\x02\x03\x04"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_file(tmp_path / "absent.txt")


def test_save_into_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_file(tmp_path, "text")