import struct

from scetrace.cli import main


def _frame(payload, flags=0, sequence=1):
    header = struct.pack("<BBBBHHH", 1, flags, 0, 0, sequence, 0, 10 + len(payload))
    return header + bytes(payload)


SELECT = [0xA0, 0xA4, 0x00, 0x00, 0x02, 0xA4, 0x3F, 0x00, 0x90, 0x00]


def _write(tmp_path, data, name="trace.txt"):
    path = tmp_path / name
    path.write_text(data.hex() + "\n", encoding="utf-8")
    return path


def test_decodes_apdu(tmp_path, capsys):
    path = _write(tmp_path, _frame(SELECT))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "A0 A4 00 00 02 3F 00 (90 00)" in out
    assert out.startswith("APDU: (")


def test_details_show_status_word(tmp_path, capsys):
    path = _write(tmp_path, _frame(SELECT))
    assert main(["--details", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Status Word: Command executed successfully." in out


def test_answer_to_reset(tmp_path, capsys):
    path = _write(tmp_path, _frame([0x3B, 0x9F], flags=0x01))
    assert main([str(path)]) == 0
    assert "ATR:  (00:00:00:000:000): 3B 9F" in capsys.readouterr().out


def test_several_frames_in_one_file(tmp_path, capsys):
    path = _write(tmp_path, _frame([0x3B], flags=0x01) + _frame(SELECT))
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("ATR:")
    assert lines[1].startswith("APDU:")


def test_mid_session_warning(tmp_path, capsys):
    path = _write(tmp_path, _frame(SELECT, sequence=6))
    assert main([str(path)]) == 0
    assert "mid-session" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "absent.txt" in capsys.readouterr().err


def test_corrupted_frame_fails(tmp_path, capsys):
    data = _frame(SELECT)[:-3]
    path = _write(tmp_path, data)
    assert main([str(path)]) == 1
    assert "Corrupted buffer size" in capsys.readouterr().err