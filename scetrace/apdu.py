"""ISO 7816-4 APDU commands as seen on a SIM card interface."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

from scetrace.stk import (
    ResponseTag,
    StkTag,
    additional_status_description,
    command_name,
    command_qualifier_description,
    device_name,
    duration_unit_name,
    response_tag_name,
    result_status_description,
    tag_name,
    text_encoding_name,
    tone_name,
)
from scetrace.terminal_profile import decode_terminal_profile

__all__ = ["CommandType", "InstructionCode", "ApduCommand"]


class CommandType(IntFlag):
    """Broad family a command belongs to."""

    SIM_TOOLKIT = 1 << 0
    IO = 1 << 1
    AUTHENTICATION = 1 << 2
    UNKNOWN = 1 << 3


class InstructionCode(IntEnum):
    # File management
    SELECT = 0xA4
    STATUS = 0xF2
    READ_BINARY = 0xB0
    UPDATE_BINARY = 0xD6
    READ_RECORD = 0xB2
    UPDATE_RECORD = 0xDC
    SEEK = 0xA2
    INCREASE = 0x32
    INVALIDATE = 0x04
    REHABILITATE = 0x44
    GET_RESPONSE = 0xC0
    VERIFY_CHV = 0x20
    CHANGE_CHV = 0x24
    DISABLE_CHV = 0x26
    ENABLE_CHV = 0x28
    UNBLOCK_CHV = 0x2C
    # SIM toolkit
    TERMINAL_PROFILE = 0x10
    ENVELOPE = 0xC2
    FETCH = 0x12
    TERMINAL_RESPONSE = 0x14
    MANAGE_CHANNEL = 0x70
    # Authentication
    RUN_GSM_ALGORITHM = 0x88


_INSTRUCTION_NAMES = {
    InstructionCode.RUN_GSM_ALGORITHM: "Run GSM Algorithm",
    InstructionCode.TERMINAL_PROFILE: "Terminal Profile",
    InstructionCode.ENVELOPE: "Envelope",
    InstructionCode.FETCH: "Fetch",
    InstructionCode.TERMINAL_RESPONSE: "Terminal Response",
    InstructionCode.MANAGE_CHANNEL: "Manage Channel",
    InstructionCode.SELECT: "Select",
    InstructionCode.STATUS: "Status",
    InstructionCode.READ_BINARY: "Read Binary",
    InstructionCode.UPDATE_BINARY: "Update Binary",
    InstructionCode.READ_RECORD: "Read Record",
    InstructionCode.UPDATE_RECORD: "Update Record",
    InstructionCode.SEEK: "Seek",
    InstructionCode.INCREASE: "Increase",
    InstructionCode.INVALIDATE: "Invalidate",
    InstructionCode.REHABILITATE: "Rehabilitate",
    InstructionCode.GET_RESPONSE: "Get Response",
    InstructionCode.VERIFY_CHV: "Verify CHV",
    InstructionCode.CHANGE_CHV: "ChangeCHV",
    InstructionCode.DISABLE_CHV: "Disable CHV",
    InstructionCode.ENABLE_CHV: "Enable CHV",
    InstructionCode.UNBLOCK_CHV: "Unblock CHV",
}

_TYPE_BY_INSTRUCTION = {
    InstructionCode.RUN_GSM_ALGORITHM: CommandType.AUTHENTICATION,
    InstructionCode.TERMINAL_PROFILE: CommandType.SIM_TOOLKIT,
    InstructionCode.ENVELOPE: CommandType.SIM_TOOLKIT,
    InstructionCode.FETCH: CommandType.SIM_TOOLKIT,
    InstructionCode.TERMINAL_RESPONSE: CommandType.SIM_TOOLKIT,
    InstructionCode.MANAGE_CHANNEL: CommandType.SIM_TOOLKIT,
    **{
        code: CommandType.IO
        for code in (
            InstructionCode.SELECT,
            InstructionCode.STATUS,
            InstructionCode.READ_BINARY,
            InstructionCode.UPDATE_BINARY,
            InstructionCode.READ_RECORD,
            InstructionCode.UPDATE_RECORD,
            InstructionCode.SEEK,
            InstructionCode.INCREASE,
            InstructionCode.INVALIDATE,
            InstructionCode.REHABILITATE,
            InstructionCode.GET_RESPONSE,
            InstructionCode.VERIFY_CHV,
            InstructionCode.CHANGE_CHV,
            InstructionCode.DISABLE_CHV,
            InstructionCode.ENABLE_CHV,
            InstructionCode.UNBLOCK_CHV,
        )
    },
}

_WARNING_SUFFIXES = {
    0x81: " Part of returned data may be corrupted.",
    0x82: " End of file / record reached before reading Le bytes.",
    0x83: " Selected file invalidated.",
    0x84: " FCI not formatted according to standard.",
}

_CLA_SUFFIXES = {
    0x81: "\tLogical channel not supported.",
    0x82: "\tSecure messaging not supported.",
}

_NOT_ALLOWED_SUFFIXES = {
    0x81: " Command incompatible with file structure.",
    0x82: " Security status not satisfied.",
    0x83: " Authentication method blocked.",
    0x84: " Referenced data invalidated.",
    0x85: " Conditions of use not satisfied.",
    0x86: " No current EF.",
    0x87: " Expected SM data objects missing.",
    0x88: " SM data objects incorrect.",
}

_WRONG_PARAMETER_SUFFIXES = {
    0x80: " Incorrect parameters in the data field.",
    0x81: " Function not supported.",
    0x82: " File not found.",
    0x83: " Record not found.",
    0x84: " Not enough memory space in the file.",
    0x85: " Lc inconsistent with TLV structure.",
    0x86: " Incorrect parameters P1-P2.",
    0x87: " Lc inconsistent with P1-P2.",
    0x88: " Referenced data not found.",
}

_FIXED_STATUS_WORDS = {
    0x90: "Command executed successfully.",
    0x66: "Reserved for security-related issues.",
    0x67: "Wrong length.",
    0x6B: "Wrong parameter(s) P1-P2.",
    0x6D: "Instruction code not supported or invalid.",
    0x6E: "Class not supported.",
    0x6F: "No precise diagnosis.",
}

_SELECTION_CONTROL = {
    0: "Select MF, DF or EF",
    1: "Select child DF",
    2: "Select EF under current DF",
    3: "Select parent DF of the current DF",
    4: "Direct selection by DF name",
    5: "Selection by DF name",
    6: "Selection by DF name",
    7: "Selection by DF name",
    8: "Select from MF",
    9: "Select from current DF",
    **{value: "Selection by path" for value in range(0xA, 0x10)},
}

_SELECT_RECORD = {0: "First record", 1: "Last record", 2: "Next record", 3: "Previous record"}
_SELECT_CONTROL = {0: "Return FCI, optional template", 4: "Return FCP template", 8: "Return FMD template"}
_EF_MODE = {0: "Currently selected EF", 0xF8: "Short EF identifier"}

_FILE_ACCESSIBILITY = {0: "Non-shareable file", 0x40: "Shareable file"}
_FILE_TYPE = {0: "\nWorking EF", 8: "\nInternal EF", 0x38: "\nDF or ADF"}
_EF_STRUCTURE = {
    0: "\nNo information given",
    1: "\nTransparent structure",
    2: "\nLinear fixed structure",
    6: "\nCyclic structure",
}
_LIFE_CYCLE = {
    0: "No information given",
    1: "Creation state",
    3: "Initialization state",
    4: "Operational state - deactivated",
    6: "Operational state - deactivated",
    5: "Operational state - activated",
    7: "Operational state - activated",
    10: "Termination state",
    11: "Termination state",
    12: "Termination state",
    13: "Termination state",
}

_NUMBER_TYPE = {0: "Unknown", 1: "International Number", 2: "National Number", 3: "Network Specific Number"}
_NUMBERING_PLAN = {
    0: "Unknown",
    1: "ISDN / telephony numbering plan",
    3: "Data numbering plan",
    4: "Telex numbering plan",
    9: "Private numbering plan",
    0xF: "Reserved for extension",
}


class _Truncated(Exception):
    """A data object ended before all of its fields were read."""


class _Payload:
    """Sequential reader over the value of one data object."""

    def __init__(self, value: bytes) -> None:
        self._value = value
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._value) - self._pos

    def byte(self) -> int:
        return self.take(1)[0]

    def take(self, count: int) -> bytes:
        if self.remaining < count:
            raise _Truncated
        chunk = self._value[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def rest(self) -> bytes:
        return self.take(self.remaining)


def _hex(data: bytes) -> str:
    return "".join(f"{byte:02X}" for byte in data)


def _text(data: bytes) -> str:
    return data.decode("latin-1")


def _tlv_objects(data: bytes, tag_mask: int):
    """Yield (tag, payload) for each data object after the two leading bytes."""
    index = 2
    while index + 1 < len(data):
        tag = data[index] & tag_mask
        length = data[index + 1]
        value = data[index + 2 : index + 2 + length]
        index += 2 + length
        yield tag, _Payload(value)


# ---- FCP response objects -------------------------------------------------


def _file_descriptor(payload: _Payload) -> str:
    value = payload.byte()
    return (
        _FILE_ACCESSIBILITY.get(value & 0xC0, "")
        + _FILE_TYPE.get(value & 0x38, "")
        + _EF_STRUCTURE.get(value & 0x87, "")
    )


_RESPONSE_DECODERS: dict[int, Callable[[_Payload], str]] = {
    ResponseTag.FILE_DESCRIPTOR: _file_descriptor,
    ResponseTag.DF_NAME: lambda payload: _text(payload.rest()),
    ResponseTag.LCSI: lambda payload: _LIFE_CYCLE.get(payload.byte(), ""),
}


# ---- SIM toolkit objects --------------------------------------------------


def _command_details(payload: _Payload) -> str:
    sequence = payload.byte()
    command = payload.byte()
    qualifier = payload.byte()
    return (
        f"Sequence Number: {sequence}\n"
        f"Type: {command_name(command)}\n"
        f"Qualifier: {command_qualifier_description(command, qualifier)}"
    )


def _device_identities(payload: _Payload) -> str:
    source = device_name(payload.byte())
    destination = device_name(payload.byte())
    return f"Source: {source}\nDestination: {destination}"


def _result(payload: _Payload) -> str:
    status = payload.byte()
    result = result_status_description(status)
    if payload.remaining > 1:
        result += "\n" + additional_status_description(status, payload.byte())
    return result


def _duration(payload: _Payload) -> str:
    unit = duration_unit_name(payload.byte())
    interval = payload.byte()
    return f"Time Unit: {unit}\nTime Interval: {interval}"


def _address(payload: _Payload) -> str:
    value = payload.byte()
    number_type = _NUMBER_TYPE.get((value & 0x70) >> 4, "")
    plan = _NUMBERING_PLAN.get(value & 0x0F, "")
    return (
        f"Number Type: {number_type}\n"
        f"Numbering Plan Identification: {plan}\n"
        f"Dialing Number String: {_text(payload.rest())}"
    )


def _text_string(payload: _Payload) -> str:
    encoding = text_encoding_name(payload.byte())
    return f"Encoding: {encoding}\nString: {_text(payload.rest())}"


def _item(payload: _Payload) -> str:
    item_id = payload.byte()
    return f"Item ID: {item_id:02X}\nString: {_text(payload.rest())}"


def _response_length(payload: _Payload) -> str:
    minimum, maximum = payload.take(2)
    return f"Between {minimum} and {maximum} characters"


def _location_information(payload: _Payload) -> str:
    details = "Mobile Country & Network Codes: " + _hex(payload.take(3))
    details += "\nLocation Area Code: " + _hex(payload.take(2))
    details += "\nCell Identity Value: " + _hex(payload.take(2))
    if payload.remaining > 0:
        details += "\nExtended Cell Identity Value: " + _hex(payload.take(2))
    return details


def _file_list(payload: _Payload) -> None:
    # The file list is consumed but deliberately not shown.
    payload.rest()
    return None


_STK_DECODERS: dict[int, Callable[[_Payload], str | None]] = {
    StkTag.COMMAND_DETAILS: _command_details,
    StkTag.DEVICE_IDENTITIES: _device_identities,
    StkTag.RESULT: _result,
    StkTag.DURATION: _duration,
    StkTag.ALPHA_IDENTIFIER: lambda payload: _text(payload.rest()),
    StkTag.ADDRESS: _address,
    StkTag.TEXT_STRING: _text_string,
    StkTag.TONE: lambda payload: tone_name(payload.byte()),
    StkTag.ITEM: _item,
    StkTag.RESPONSE_LENGTH: _response_length,
    StkTag.FILE_LIST: _file_list,
    StkTag.LOCATION_INFORMATION: _location_information,
    StkTag.IMEI: lambda payload: "".join(str(byte) for byte in payload.rest()),
}


def _decode_objects(
    data: bytes,
    tag_mask: int,
    decoders: dict[int, Callable[[_Payload], str | None]],
    name_of: Callable[[int], str],
    entries: dict[str, str],
) -> None:
    for tag, payload in _tlv_objects(data, tag_mask):
        decoder = decoders.get(tag, lambda p: _hex(p.rest()))
        try:
            value = decoder(payload)
        except _Truncated:
            break
        if value is not None:
            entries[name_of(tag)] = value


@dataclass
class ApduCommand:
    """A command sent to the card together with the card's status word."""

    type: CommandType = CommandType.UNKNOWN
    instruction_class: int = 0
    instruction_code: int = 0
    first_parameter: int = 0
    second_parameter: int = 0
    data: bytearray = field(default_factory=bytearray)
    first_status_byte: int = 0
    second_status_byte: int = 0
    application_map: dict[str, str] | None = None

    @property
    def data_length(self) -> int:
        """Lc, the number of data bytes as carried in one byte."""
        return len(self.data) & 0xFF

    def set_instruction_code(self, code: int) -> None:
        """Set INS and derive the command type from it.

        A GET RESPONSE keeps the type of the command it answers.
        """
        self.instruction_code = code
        if code != InstructionCode.GET_RESPONSE:
            self.type = _TYPE_BY_INSTRUCTION.get(code, CommandType.UNKNOWN)

    def instruction_name(self) -> str:
        """Human-readable name of the instruction code."""
        return _INSTRUCTION_NAMES.get(self.instruction_code, "Unknown")

    def protocol_string(self) -> str:
        """CLA INS P1 P2 Lc Data (SW1 SW2) in hex."""
        parts = [
            f"{self.instruction_class:02X}",
            f"{self.instruction_code:02X}",
            f"{self.first_parameter:02X}",
            f"{self.second_parameter:02X}",
            f"{self.data_length:02X}",
        ]
        parts.extend(f"{byte:02X}" for byte in self.data)
        parts.append(f"({self.first_status_byte:02X} {self.second_status_byte:02X})")
        return " ".join(parts)

    def status_word_description(self) -> str:
        """Describe the status word SW1 SW2."""
        sw1 = self.first_status_byte
        sw2 = self.second_status_byte
        if sw1 in _FIXED_STATUS_WORDS:
            return _FIXED_STATUS_WORDS[sw1]
        if sw1 == 0x91:
            return (
                "Command executed successfully. Information available from proactive SIM; "
                f"{sw2:02X} bytes available."
            )
        if sw1 == 0x61:
            return f"Command successful. {sw2:02X} bytes of data available."
        if sw1 in (0x62, 0x64):
            return "State of non-volatile memory unchanged." + _WARNING_SUFFIXES.get(sw2, "")
        if sw1 == 0x63:
            text = "State of non-volatile memory changed."
            if sw2 == 0x81:
                text += " File filled up by the last write."
            elif 0xC0 <= sw2 <= 0xCF:
                text += f" Command failed. {~(sw2 & 0xC0)} retries remaining."
            return text
        if sw1 == 0x65:
            text = "State of non-volatile memory changed."
            if sw2 == 0x81:
                text += " Memory failure."
            return text
        if sw1 == 0x68:
            return "Functions in CLA not supported." + _CLA_SUFFIXES.get(sw2, "")
        if sw1 == 0x69:
            return "Command not allowed." + _NOT_ALLOWED_SUFFIXES.get(sw2, "")
        if sw1 == 0x6A:
            return "Wrong parameter(s) P1-P2." + _WRONG_PARAMETER_SUFFIXES.get(sw2, "")
        if sw1 == 0x6C:
            return f"Wrong length Le. Exact length: {sw2:02X}."
        return "Unknown status word."

    def update_application_map(self) -> None:
        """Interpret the command into key-value pairs, sorted by key.

        Instructions without an interpretation leave the map as None.
        """
        code = self.instruction_code
        p1 = self.first_parameter
        p2 = self.second_parameter
        data = bytes(self.data)
        hex_data = _hex(data)
        entries: dict[str, str] = {}

        if code == InstructionCode.SELECT:
            entries["Selection Control"] = _SELECTION_CONTROL.get(p1, "")
            entries[_SELECT_RECORD.get(p2 & 0xF3, "")] = _SELECT_CONTROL.get(p2 & 0xFC, "")
            entries["File"] = hex_data
        elif code == InstructionCode.STATUS:
            pass
        elif code in (InstructionCode.READ_BINARY, InstructionCode.UPDATE_BINARY):
            entries["Offset High"] = f"{p1:02X}"
            entries["Offset Low"] = f"{p2:02X}"
            key = "Updated Data" if code == InstructionCode.UPDATE_BINARY else "Data Read"
            entries[key] = hex_data
        elif code in (InstructionCode.READ_RECORD, InstructionCode.SEEK, InstructionCode.UPDATE_RECORD):
            entries["Record Number"] = f"{p1:02X}"
            entries["Currently Selected EF Mode"] = _EF_MODE.get(p2 & 0xF8, "")
            entries[self._record_key(p1, p2)] = hex_data
        elif code == InstructionCode.GET_RESPONSE:
            if data and data[0] == ResponseTag.FCP_TEMPLATE:
                _decode_objects(data, 0xFF, _RESPONSE_DECODERS, response_tag_name, entries)
        elif code in (
            InstructionCode.RUN_GSM_ALGORITHM,
            InstructionCode.UNBLOCK_CHV,
            InstructionCode.VERIFY_CHV,
            InstructionCode.CHANGE_CHV,
        ):
            kind = "Global reference data number" if p2 & 0x80 == 0 else "Specific reference data number"
            entries[kind] = f"{p2 & 0x1F:02X}"
        elif code == InstructionCode.MANAGE_CHANNEL:
            if p1 == 0:
                entries["Open Channel"] = f"{p2:02X}"
            elif p1 == 0x80:
                entries["Close Channel"] = hex_data
            else:
                entries[""] = ""
        elif code == InstructionCode.TERMINAL_PROFILE:
            entries.update(decode_terminal_profile(data))
        elif code in (InstructionCode.ENVELOPE, InstructionCode.TERMINAL_RESPONSE, InstructionCode.FETCH):
            if data:
                _decode_objects(data, 0x7F, _STK_DECODERS, tag_name, entries)
        else:
            self.application_map = None
            return

        entries["Status Word"] = self.status_word_description()
        self.application_map = dict(sorted(entries.items()))

    def _record_key(self, p1: int, p2: int) -> str:
        if self.instruction_code == InstructionCode.SEEK:
            return "Search Pattern"
        is_read = self.instruction_code == InstructionCode.READ_RECORD
        mode = p2 & 0x07
        if mode == 0:
            return "Read first occurence" if is_read else "First record"
        if mode == 1:
            return "Read last occurrence" if is_read else "Last record"
        if mode == 2:
            return "Read next occurrence" if is_read else "Next record"
        if mode == 3:
            return "Read previous occurrence" if is_read else "Previous record"
        if mode == 4:
            return "Data Read" if is_read else "Data Update"
        if mode == 5:
            return f"Read all records from {p1:02X} up to the last"
        if mode == 6:
            return f"Read all records from the last up to {p1:02X}"
        return ""