"""Decoding of the frames a SIM tracing device sends over USB."""

from __future__ import annotations

import logging
import struct
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from scetrace.apdu import ApduCommand
from scetrace.splitter import ApduSplitter

__all__ = [
    "SIMTRACE_PID",
    "SIMTRACE_VID",
    "SIMTRACE_OUT",
    "SIMTRACE_IN_BULK",
    "SIMTRACE_IN_INTERRUPT",
    "SimTraceCommand",
    "SimTraceFlag",
    "SimTraceHeader",
    "CorruptedBufferError",
    "TraceProcessor",
    "format_elapsed",
]

logger = logging.getLogger(__name__)

SIMTRACE_PID = 0x0762
SIMTRACE_VID = 0x16C0
SIMTRACE_OUT = 0x00 | 0x01  # endpoint out, isochronous
SIMTRACE_IN_BULK = 0x80 | 0x02  # endpoint in, bulk
SIMTRACE_IN_INTERRUPT = 0x80 | 0x03  # endpoint in, interrupt

_HEADER = struct.Struct("<BBBBHHH")


class SimTraceCommand(IntEnum):
    NULL = 0
    DATA = 1
    RESET = 2
    STATS = 3
    COMMAND_APDU = 4


class SimTraceFlag(IntFlag):
    ANSWER_TO_RESET = 0x01
    WAIT_TIME_EXPIRED = 0x04
    PPS_FI_DI = 0x08


class CorruptedBufferError(RuntimeError):
    """A trace frame is shorter than its header says."""


@dataclass(frozen=True)
class SimTraceHeader:
    """The fixed header in front of every trace frame."""

    command: int
    flags: int
    reset: tuple[int, int]
    sequence_number: int
    offset: int
    total_buffer_size: int

    SIZE = _HEADER.size

    @classmethod
    def from_bytes(cls, data: bytes) -> SimTraceHeader:
        """Parse the header at the start of a frame."""
        if len(data) < _HEADER.size:
            raise CorruptedBufferError("Corrupted buffer size")
        command, flags, reset0, reset1, sequence, offset, total = _HEADER.unpack_from(data)
        return cls(command, flags, (reset0, reset1), sequence, offset, total)


def format_elapsed(microseconds: int) -> str:
    """Format a duration as hours:minutes:seconds:milliseconds:microseconds."""
    milliseconds, micros = divmod(int(microseconds), 1000)
    seconds, millis = divmod(milliseconds, 1000)
    minutes, secs = divmod(seconds, 60)
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}:{secs:02d}:{millis:03d}:{micros:03d}"


def _ignore(*_args) -> None:
    return None


class TraceProcessor:
    """Turn trace frames into APDU, ATR and raw-input notifications.

    on_apdu(output, command) receives each complete command with its display
    line, on_atr(output) each answer to reset, on_raw(hex_text) every data
    frame, and on_mid_session() is called when tracing joins a session that
    was already under way.
    """

    def __init__(
        self,
        on_apdu: Callable[[str, ApduCommand], None] | None = None,
        on_atr: Callable[[str], None] | None = None,
        on_raw: Callable[[str], None] | None = None,
        on_mid_session: Callable[[], None] | None = None,
    ) -> None:
        self._on_apdu = on_apdu or _ignore
        self._on_atr = on_atr or _ignore
        self._on_raw = on_raw or _ignore
        self._on_mid_session = on_mid_session or _ignore
        self._first_apdu_time: int | None = None
        self._splitter = ApduSplitter(self._command_split)

    def reset(self) -> None:
        """Forget the session: splitter state and the first-frame time."""
        self._splitter.reset()
        self._first_apdu_time = None

    def process_input(self, data: bytes) -> None:
        """Process one buffer read from the device, which may hold several frames."""
        data = bytes(data)
        while True:
            header = SimTraceHeader.from_bytes(data)
            total = header.total_buffer_size
            if header.command == SimTraceCommand.DATA and len(data) > total:
                if total < SimTraceHeader.SIZE:
                    raise CorruptedBufferError("Corrupted buffer size")
                self._process_frame(header, data[:total])
                data = data[total:]
                continue
            self._process_frame(header, data)
            return

    def _process_frame(self, header: SimTraceHeader, data: bytes) -> None:
        if header.command != SimTraceCommand.DATA:
            logger.info("Unknown SIMTraceCommand Type 0x%02x", header.command)
            return
        if len(data) < header.total_buffer_size:
            raise CorruptedBufferError("Corrupted buffer size")

        if header.flags & SimTraceFlag.PPS_FI_DI:
            logger.info("PPS(Fi=%u/Di=%u)", header.reset[0], header.reset[1])
        if header.flags & SimTraceFlag.WAIT_TIME_EXPIRED:
            logger.info("Wait time expired")
            return

        payload = data[SimTraceHeader.SIZE :]
        self._on_raw(data.hex())

        if self._first_apdu_time is None:
            self._first_apdu_time = time.monotonic_ns()
            if header.sequence_number > 1:
                self._on_mid_session()

        if not payload:
            return

        if header.flags & SimTraceFlag.ANSWER_TO_RESET:
            text = "".join(f"{byte:02x} " for byte in payload)
            self._on_atr("ATR:  (00:00:00:000:000): " + text.upper())
            return

        self._splitter.split_input(payload)

    def _command_split(self, command: ApduCommand, end: int) -> None:
        start = self._first_apdu_time if self._first_apdu_time is not None else end
        elapsed = max(end - start, 0) // 1000
        output = f"APDU: ({format_elapsed(elapsed)}): " + command.protocol_string()
        self._on_apdu(output, command)