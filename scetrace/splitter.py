"""Reassembly of APDU commands from the raw byte stream seen by a tracer."""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Callable, Iterable
from enum import IntEnum

from scetrace.apdu import ApduCommand

__all__ = ["ApduSplitter"]

MAX_RESPONSE_LENGTH = 256

Callback = Callable[[ApduCommand, int], None]


class _State(IntEnum):
    CLASS = 0
    INSTRUCTION = 1
    PARAMETER1 = 2
    PARAMETER2 = 3
    COMMAND_LENGTH = 4
    DATA = 5
    STATUS_BYTE1 = 6
    STATUS_BYTE2 = 7


class ApduSplitter:
    """Split tracer input into complete APDU commands and their status words.

    Input may arrive in arbitrary pieces: a command may span several calls to
    split_input and one call may hold several commands. Every complete command
    is handed to the callback together with the monotonic time, in
    nanoseconds, at which its first byte was seen.
    """

    def __init__(self, callback: Callback) -> None:
        self._callback = callback
        self._command = ApduCommand()
        self._state = _State.CLASS
        self._remaining = 0
        self._start: int | None = None

    def split_input(self, data: Iterable[int]) -> None:
        """Feed bytes received from the tracer."""
        for byte in data:
            self._insert_byte(byte & 0xFF)

    def reset(self) -> None:
        """Start over; the next byte is expected to be a CLA byte."""
        self._state = _State.CLASS
        self._command.data.clear()
        self._start = None

    def _insert_byte(self, byte: int) -> None:
        command = self._command
        state = self._state
        if state is _State.CLASS:
            self._start = time.monotonic_ns()
            command.instruction_class = byte
            self._state = _State.INSTRUCTION
        elif state is _State.INSTRUCTION:
            command.set_instruction_code(byte)
            self._state = _State.PARAMETER1
        elif state is _State.PARAMETER1:
            command.first_parameter = byte
            self._state = _State.PARAMETER2
        elif state is _State.PARAMETER2:
            command.second_parameter = byte
            self._state = _State.COMMAND_LENGTH
        elif state is _State.COMMAND_LENGTH:
            self._remaining = MAX_RESPONSE_LENGTH if byte == 0 else byte
            self._state = _State.STATUS_BYTE1
        elif state is _State.DATA:
            command.data.append(byte)
            self._remaining = (self._remaining - 1) & 0xFFFFFFFF
            if self._remaining == 0:
                self._state = _State.STATUS_BYTE1
        elif state is _State.STATUS_BYTE1:
            if byte == 0x60:
                return  # waiting time extension
            if byte in (command.instruction_code, command.instruction_code + 1):
                # Procedure byte: data follows.
                self._state = _State.DATA
            else:
                command.first_status_byte = byte
                self._state = _State.STATUS_BYTE2
        else:
            command.second_status_byte = byte
            command.update_application_map()
            finished = dataclasses.replace(
                command,
                data=bytearray(command.data),
                application_map=None if command.application_map is None else dict(command.application_map),
            )
            start = self._start if self._start is not None else time.monotonic_ns()
            self.reset()
            self._callback(finished, start)