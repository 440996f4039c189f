"""Decoding of the TERMINAL PROFILE download sent by a terminal to the card."""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = ["decode_terminal_profile"]

SUPPORTED_KEY = "CAT facilities supported by the terminal"
UNSUPPORTED_KEY = "CAT facilities not supported by the terminal"

_P = "Proactive UICC: "
_PLI = _P + "PROVIDE LOCAL INFORMATION "
_EV = "Event: "
_CC = "Call Control by NAA"
_CONTAINERS = "Profile Container, Envelope Container, COMMAND CONTAINER and ENCAPSULATED SESSION CONTROL"


def _ie(cls: str) -> str:
    return f' (i.e. class "{cls}" is supported)'


def _if(cls: str) -> str:
    return f' (if class "{cls}" is supported)'


def _ifs(first: str, second: str) -> str:
    return f' (if classes "{first}" and "{second}" are supported)'


def _prefixed(prefix: str, *names: str) -> tuple[str, ...]:
    return tuple(prefix + name for name in names)


# Facility names for each profile byte, listed from bit 1 (least significant) upwards.
# An empty name marks a bit that carries no facility.
_FACILITIES: dict[int, tuple[str, ...]] = {
    0: (
        "Profile Download",
        "SMS-PP data download",
        "Cell Broadcast data download",
        "Menu selection",
        "SMS-PP data download",
        "Timer expiration",
        "USSD string data object support in Call Control by USIM",
        _CC,
    ),
    1: ("Command result", _CC, _CC, "MO short message control support", _CC, "UCS2 Entry", "UCS2 Display", "Display Text"),
    2: _prefixed(
        _P, "DISPLAY TEXT", "GET INKEY", "GET INPUT", "MORE TIME", "PLAY TONE", "POLL INTERVAL", "POLLING OFF", "REFRESH"
    ),
    3: _prefixed(
        _P,
        "SELECT ITEM",
        "SEND SHORT MESSAGE with 3GPP-SMS-TPDU",
        "SEND SS",
        "SEND USSD",
        "SET UP CALL",
        "SET UP MENU",
        "PROVIDE LOCAL INFORMATION (MCC, MNC, LAC, Cell ID & IMEI)",
        "PROVIDE LOCAL INFORMATION (NMR) ",
    ),
    4: (_P + "SET UP EVENT LIST",)
    + _prefixed(
        _EV,
        "MT call",
        "Call connected",
        "Call disconnected",
        "Location status",
        "User activity",
        "Idle screen available",
        "Card reader status ",
    ),
    5: _prefixed(
        _EV,
        "Language selection",
        "Browser Termination" + _ie("ac"),
        "Data available",
        "Channel status",
        "Access Technology Change",
        "Display parameters changed",
        "Local Connection",
        "Network Search Mode Change",
    ),
    6: _prefixed(
        _P,
        "POWER ON CARD",
        "POWER OFF CARD",
        "PERFORM CARD APDU",
        "GET READER STATUS (Card reader status)",
        "GET READER STATUS (Card reader identifier)",
    ),
    7: (
        _P + "TIMER MANAGEMENT (start, stop)",
        _P + "TIMER MANAGEMENT (get current value)",
        _PLI + "(date, time and time zone)",
        "GET INKEY",
        "SET UP IDLE MODE TEXT",
        "RUN AT COMMAND" + _ie("b"),
        "SETUP CALL",
        _CC,
    ),
    8: (
        "DISPLAY TEXT",
        "SEND DTMF command",
        _PLI + "(NMR)",
        _PLI + "(language)",
        _P + "PROVIDE LOCAL INFORMATION, Timing Advance",
        _P + "LANGUAGE NOTIFICATION",
        _P + "LAUNCH BROWSER" + _ie("ab"),
        _PLI + "(Access Technology)",
    ),
    9: ("Soft keys support for SELECT ITEM", "Soft Keys support for SET UP MENU"),
    11: _prefixed(
        _P,
        "OPEN CHANNEL",
        "CLOSE CHANNEL",
        "RECEIVE DATA",
        "SEND DATA",
        "GET CHANNEL STATUS",
        "SERVICE SEARCH",
        "GET SERVICE INFORMATION",
        "DECLARE SERVICE",
    ),
    12: ("CSD", "GPRS", "Bluetooth", "IrDA", "RS232"),
    13: ("",) * 5
    + (
        'Display capability (i.e. class "ND" is indicated)',
        'Keypad capability (i.e. class "NK" is indicated)',
        "Screen Sizing Parameters",
    ),
    14: ("",) * 7 + ("Variable size fonts",),
    15: ("Display resizability", "Text Wrapping", "Text Scrolling", "Text Attributes"),
    16: (
        "TCP, UICC in client mode, remote connection",
        "UDP, UICC in client mode, remote connection",
        "TCP, UICC in server mode",
        "TCP, UICC in client mode, local connection" + _ie("k"),
        "UDP, UICC in client mode, local connection" + _ie("k"),
        "Direct communication channel" + _ie("k"),
        "E-UTRAN",
        "HSDPA",
    ),
    17: (
        _P + "DISPLAY TEXT (Variable Time out)",
        _P + "GET INKEY (help is supported while waiting for immediate response or variable timeout)",
        'USB (Bearer Independent protocol supported bearers, class "e")',
        _P + "GET INKEY (Variable Timeout)",
        _PLI + "(ESN)",
        "Call control on GPRS",
        _PLI + "(IMEISV)",
        _PLI + "(Search Mode change)",
    ),
    19: (
        "SEND CDMA SMS",
        "CDMA SMS-PP data download",
        "CDMA SMS BROADCAST data download",
        "CDMA USSD support",
        "CDMA MO SMS Control support",
    ),
    20: ("WML", "XHTML", "HTML", "CHTML"),
    21: (
        "Support of UTRAN PS with extended parameters",
        _PLI + "(battery state)," + _ie("g"),
        _P + "PLAY TONE (Melody tones and Themed tones supported)",
        'Multi-media Calls in SET UP CALL (if class "h" supported)',
        "Toolkit-initiated GBA",
        _P + "RETRIEVE MULTIMEDIA MESSAGE" + _if("j"),
        _P + "SUBMIT MULTIMEDIA MESSAGE" + _if("j"),
        _P + "DISPLAY MULTIMEDIA MESSAGE" + _if("j") + " ",
    ),
    22: (
        _P + "SET FRAMES" + _ie("i"),
        _P + "GET FRAMES STATUS" + _ie("i"),
        "MMS notification download" + _if("j"),
        "Alpha Identifier in REFRESH command",
        "Geographical Location Reporting" + _if("n"),
        _PLI + "(MEID)",
        _PLI + "(NMR(UTRAN/E-UTRAN))",
        "USSD Data download and application mode",
    ),
    24: (
        _EV + "Browsing status" + _ie("ac"),
        _EV + "MMS Transfer status" + _if("j"),
        _EV + "Frame Information changed" + _ie("i"),
        _EV + "I-WLAN Access status" + _if("e"),
        "Event Network Rejection",
        _EV + "HCI connectivity event" + _ie("m"),
        "E-UTRAN support in Event Network Rejection",
        "Multiple access technologies supported in Event Access Technology Change and PROVIDE LOCAL INFORMATION ",
    ),
    25: (_EV + "CSG Cell Selection" + _if("q"), _EV + "Contactless state request" + _if("r")),
    27: _prefixed("Terminal alignment ", "left", "centre", "right")
    + _prefixed("Terminal font size ", "normal", "large", "small"),
    28: _prefixed(
        "Terminal style ",
        "normal",
        "bold",
        "italic",
        "underlined",
        "strikethrough",
        "text foreground colour",
        "text background colour",
    ),
    29: (
        "I-WLAN bearer support" + _if("e"),
        _PLI + "(WSID of the current I-WLAN connection)",
        "TERMINAL APPLICATIONS" + _ie("k"),
        "Steering of Roaming REFRESH support",
        _P + "ACTIVATE" + _ie("l"),
        _P + "GEOGRAPHICAL LOCATION REQUEST" + _if("n"),
        _PLI + "(Broadcast Network Information)" + _ie("o"),
        "Steering of Roaming for I-WLAN REFRESH support",
    ),
    30: (
        _P + "Contactless State Changed" + _if("r"),
        "CSG cell discovery" + _if("q"),
        "Confirmation parameters supported for OPEN CHANNEL in Terminal Server Mode" + _ifs("e", "k"),
        "Communication Control for IMS Support of CAT over the modem interface" + _if("s"),
        "Incoming IMS Data event" + _ifs("e", "t"),
        "IMS Registration event" + _ifs("e", "t"),
        "Proactive UICC : " + _CONTAINERS + _if("u")[1:],
    ),
    31: (
        "Support of IMS as a bearer for BIP" + _ifs("e", "t"),
        "Support of PROVIDE LOCATION INFORMATION, H(e)NB IP address" + _if("v"),
        "Support of PROVIDE LOCATION INFORMATION, H(e)NB surrounding macrocells" + _if("w"),
        "Launch parameters supported for OPEN CHANNEL in Terminal Server Mode",
        "Direct communication channel for OPEN CHANNEL in Terminal Server Mode",
        _P + "Security for " + _CONTAINERS + _ifs("u", "x"),
        "CAT service list for eCAT client",
        "Refresh enforcement policy",
    ),
    32: (
        "DNS server address request for OPEN CHANNEL related to packet data service bearer" + _ifs("e", "aa"),
        "Support of Network Access Name reuse indication for CLOSE CHANNEL related to packet data service bearer"
        + _ifs("e", "z"),
        _EV + "Poll Interval" + _ie("ad")[1:],
    ),
}

# Numeric fields carried in part or all of a profile byte.
_FIELDS: dict[int, tuple[str, Callable[[int], int]]] = {
    10: ("Maximum number of soft keys available", lambda byte: byte),
    12: ("Number of channels supported by terminal", lambda byte: byte >> 5),
    13: ("Number of characters supported down the terminal display", lambda byte: byte & 0x1F),
    14: ("Number of characters supported across the terminal display", lambda byte: byte & 0x7F),
    15: ("Width reduction when in a menu", lambda byte: byte >> 5),
    18: ("Protocol Version support", lambda byte: byte & 0x0F),
    23: (
        "Maximum number of frames supported (including frames created in existing frames)",
        lambda byte: byte & 0x0F,
    ),
}


def decode_terminal_profile(data: Iterable[int]) -> dict[str, str]:
    """Decode a terminal profile into named fields and facility lists.

    The result always holds the supported and unsupported facility lists,
    each a newline-separated string, plus any numeric fields present.
    """
    result: dict[str, str] = {}
    supported: list[str] = []
    unsupported: list[str] = []

    for index, byte in enumerate(data):
        byte &= 0xFF
        field = _FIELDS.get(index)
        if field is not None:
            label, extract = field
            result[label] = str(extract(byte))
        for bit, facility in enumerate(_FACILITIES.get(index, ())):
            if not facility:
                continue
            (supported if byte & (1 << bit) else unsupported).append(facility)

    result[SUPPORTED_KEY] = "\n".join(supported)
    result[UNSUPPORTED_KEY] = "\n".join(unsupported)
    return result