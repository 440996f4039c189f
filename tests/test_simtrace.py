import struct

import pytest

from scetrace.simtrace import (
    CorruptedBufferError,
    SimTraceCommand,
    SimTraceFlag,
    SimTraceHeader,
    TraceProcessor,
    format_elapsed,
)


def make_frame(payload=b"", flags=0, seq=1, command=SimTraceCommand.DATA, total=None):
    size = 10 + len(payload) if total is None else total
    return struct.pack("<BBBBHHH", command, flags, 0x11, 0x22, seq, 0, size) + payload


class Recorder:
    def __init__(self):
        self.apdus = []
        self.atrs = []
        self.raw = []
        self.mid = 0

    def on_apdu(self, output, command):
        self.apdus.append((output, command))

    def on_atr(self, output):
        self.atrs.append(output)

    def on_raw(self, text):
        self.raw.append(text)

    def on_mid(self):
        self.mid += 1


def test_header_from_bytes():
    header = SimTraceHeader.from_bytes(make_frame(b"\x01\x02", flags=SimTraceFlag.PPS_FI_DI, seq=7))
    assert header.command == SimTraceCommand.DATA
    assert header.flags == SimTraceFlag.PPS_FI_DI
    assert header.reset == (0x11, 0x22)
    assert header.sequence_number == 7
    assert header.offset == 0
    assert header.total_buffer_size == 12


def test_short_header_raises():
    with pytest.raises(CorruptedBufferError):
        SimTraceHeader.from_bytes(b"\x01\x00\x00")


def test_format_elapsed_zero():
    assert format_elapsed(0) == "00:00:00:000:000"


def test_format_elapsed_components():
    micros = ((((1 * 60 + 2) * 60 + 3) * 1000 + 4) * 1000) + 5
    assert format_elapsed(micros) == "01:02:03:004:005"


def test_atr_frame():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    frame = make_frame(b"\x3b\x9f", flags=SimTraceFlag.ANSWER_TO_RESET)
    processor.process_input(frame)
    assert rec.atrs == ["ATR:  (00:00:00:000:000): 3B 9F "]
    assert rec.raw == [frame.hex()]
    assert rec.apdus == []


def test_apdu_frame():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    processor.process_input(make_frame(bytes([0xA0, 0xF2, 0x00, 0x00, 0x16, 0x90, 0x00])))
    assert len(rec.apdus) == 1
    output, command = rec.apdus[0]
    assert output.startswith("APDU: (")
    assert output.endswith("): " + command.protocol_string())
    assert command.first_status_byte == 0x90


def test_mid_session_detection():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    processor.process_input(make_frame(seq=5))
    processor.process_input(make_frame(seq=6))
    assert rec.mid == 1

    fresh = Recorder()
    fresh_processor = TraceProcessor(fresh.on_apdu, fresh.on_atr, fresh.on_raw, fresh.on_mid)
    fresh_processor.process_input(make_frame(seq=1))
    assert fresh.mid == 0


def test_reset_allows_mid_session_again():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    processor.process_input(make_frame(seq=5))
    processor.reset()
    processor.process_input(make_frame(seq=9))
    assert rec.mid == 2


def test_mangled_frames_are_separated():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    first = make_frame(b"\xaa", seq=1)
    second = make_frame(b"\xbb\xcc", seq=2)
    processor.process_input(first + second)
    assert rec.raw == [first.hex(), second.hex()]


def test_short_buffer_raises():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    with pytest.raises(CorruptedBufferError):
        processor.process_input(make_frame(b"\x01", total=20))


def test_wait_time_expired_emits_nothing():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    processor.process_input(make_frame(b"\x01\x02", flags=SimTraceFlag.WAIT_TIME_EXPIRED))
    assert rec.raw == []
    assert rec.apdus == []


def test_unknown_command_is_ignored():
    rec = Recorder()
    processor = TraceProcessor(rec.on_apdu, rec.on_atr, rec.on_raw, rec.on_mid)
    processor.process_input(make_frame(b"\x01", command=SimTraceCommand.STATS))
    assert rec.raw == []
    assert rec.mid == 0