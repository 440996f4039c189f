"""Names and descriptions for SIM toolkit (CAT) values and response tags."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "TextEncoding",
    "DurationUnit",
    "StkTag",
    "ResponseTag",
    "StkDevice",
    "StkCommand",
    "tone_name",
    "command_qualifier_description",
    "text_encoding_name",
    "duration_unit_name",
    "result_status_description",
    "additional_status_description",
    "command_name",
    "device_name",
    "tag_name",
    "response_tag_name",
]


class TextEncoding(IntEnum):
    SEVEN_BIT = 0x00
    EIGHT_BIT = 0x04
    SIXTEEN_BIT = 0x08


class DurationUnit(IntEnum):
    MINUTES = 0
    SECONDS = 1
    TENTHS_OF_SECOND = 2


class StkTag(IntEnum):
    PROACTIVE = 0xD0
    COMPREHENSION_REQUIRED = 0x80
    COMMAND_DETAILS = 0x01
    DEVICE_IDENTITIES = 0x02
    RESULT = 0x03
    DURATION = 0x04
    ALPHA_IDENTIFIER = 0x05
    ADDRESS = 0x06
    CAPABILITY_CONFIGURATION_PARAMETERS = 0x07
    CALLED_PARTY_SUBADDRESS = 0x08
    SHORT_STRING = 0x09
    SMS_TPDU = 0x0B
    CELL_BROADCAST_PAGE = 0x0C
    TEXT_STRING = 0x0D
    TONE = 0x0E
    ITEM = 0x0F
    ITEM_IDENTIFIER = 0x10
    RESPONSE_LENGTH = 0x11
    FILE_LIST = 0x12
    LOCATION_INFORMATION = 0x13
    IMEI = 0x14


class ResponseTag(IntEnum):
    FCP_TEMPLATE = 0x62
    FILE_SIZE = 0x80
    TOTAL_FILE_SIZE = 0x81
    FILE_DESCRIPTOR = 0x82
    FILE_ID = 0x83
    DF_NAME = 0x84
    SFI = 0x88
    LCSI = 0x8A
    REFERENCED_SA = 0x8B
    COMPACT_SA = 0x8C
    EXPANDED_SA = 0xAB
    PROPRIETARY_INFORMATION = 0xA5
    PIN_STATUS_TEMPLATE_DO = 0xC6


class StkDevice(IntEnum):
    KEYPAD = 0x01
    DISPLAY = 0x02
    EARPIECE = 0x03
    ADDITIONAL_CARD_READER = 0x10
    CHANNEL_IDENTIFIER = 0x20
    ECAT_CLIENT_IDENTIFIER = 0x30
    UICC = 0x81
    TERMINAL = 0x82
    NETWORK = 0x83


class StkCommand(IntEnum):
    REFRESH = 0x01
    MORE_TIME = 0x02
    POLL_INTERVAL = 0x03
    POLLING_OFF = 0x04
    SETUP_EVENT_LIST = 0x05
    SET_UP_CALL = 0x10
    SEND_SS = 0x11
    SEND_USSD = 0x12
    SEND_SHORT_MESSAGE = 0x13
    SEND_DTMF = 0x14
    LAUNCH_BROWSER = 0x15
    GEOGRAPHICAL_LOCATION_REQUEST = 0x16
    PLAY_TONE = 0x20
    DISPLAY_TEXT = 0x21
    GET_INKEY = 0x22
    GET_INPUT = 0x23
    SELECT_ITEM = 0x24
    SETUP_MENU = 0x25
    PROVIDE_LOCAL_INFO = 0x26
    TIMER_MANAGEMENT = 0x27
    SETUP_IDLE_MODE_TEXT = 0x28
    CARD_APDU = 0x30
    POWER_ON_CARD = 0x31
    POWER_OFF_CARD = 0x32
    GET_READER_STATUS = 0x33
    RUN_AT_COMMAND = 0x34
    LANGUAGE_NOTIFICATION = 0x35
    OPEN_CHANNEL = 0x40
    CLOSE_CHANNEL = 0x41
    RECEIVE_DATA = 0x42
    SEND_DATA = 0x43
    GET_CHANNEL_STATUS = 0x44
    SERVICE_SEARCH = 0x45
    GET_SERVICE_INFORMATION = 0x46
    DECLARE_SERVICE = 0x47
    SET_FRAMES = 0x50
    GET_FRAMES_STATUS = 0x51
    RETRIEVE_MM = 0x60
    SUBMIT_MM = 0x61
    DISPLAY_MM = 0x62
    ACTIVATE = 0x70
    CONTACTLESS_STATE_CHANGED = 0x71
    COMMAND_CONTAINER = 0x72
    ENCAPSULATED_SESSION_CONTROL = 0x73
    END_OF_PROACTIVE_SESSION = 0x81


_RESPONSE_TAG_NAMES = {
    ResponseTag.FCP_TEMPLATE: "FCP Template",
    ResponseTag.FILE_SIZE: "File Size",
    ResponseTag.TOTAL_FILE_SIZE: "Total File Size",
    ResponseTag.FILE_DESCRIPTOR: "File Descriptor",
    ResponseTag.FILE_ID: "File ID",
    ResponseTag.DF_NAME: "DF Name",
    ResponseTag.SFI: "Short File Identifier",
    ResponseTag.LCSI: "Life Cycle Status Information",
    ResponseTag.REFERENCED_SA: "Referenced Security Attributes",
    ResponseTag.COMPACT_SA: "Compact Security Attributes",
    ResponseTag.EXPANDED_SA: "Expanded Security Attributes",
    ResponseTag.PROPRIETARY_INFORMATION: "Proprietary Information",
    ResponseTag.PIN_STATUS_TEMPLATE_DO: "PIN Status Template DO",
}

_TONE_NAMES = {
    0x01: "Dial tone",
    0x02: "Called subscriber busy",
    0x03: "Congestion",
    0x04: "Radio path acknowledge",
    0x05: "Radio path not available/Call dropped",
    0x06: "Error/Special information",
    0x07: "Call waiting tone",
    0x08: "Ringing tone",
    0x10: "General beep",
    0x11: "Positive acknowledgement tone",
    0x12: "Negative acknowledgement or error tone",
    0x13: "Ringing tone as selected by the user for incoming speech call",
    0x14: "Alert tone as selected by the user for incoming SMS",
    0x15: (
        "Critical Alert - This tone is to be used in critical situations.The terminal "
        "shall make every effort to alert the user when this tone is indicated "
        "independent from the volume setting in the terminal"
    ),
    0x20: "Vibrate only, if available",
    0x30: "Happy tone",
    0x31: "Sad tone",
    0x32: "Urgent action tone",
    0x33: "Question tone",
    0x34: "Message received tone",
    0x40: "Melody 1",
    0x41: "Melody 2",
    0x42: "Melody 3",
    0x43: "Melody 4",
    0x44: "Melody 5",
    0x45: "Melody 6",
    0x46: "Melody 7",
    0x47: "Melody 8",
}

# Qualifiers whose meaning is a plain value lookup.
_QUALIFIER_TABLES: dict[StkCommand, dict[int, str]] = {
    StkCommand.REFRESH: {
        0: "NAA Initialization and Full File Change Notification",
        1: "File Change Notification",
        2: "NAA Initialization and File Change Notification",
        3: "NAA Initialization",
        4: "UICC Reset",
        5: "NAA Application Reset, only applicable for a 3G platform",
        6: "NAA Session Reset, only applicable for a 3G platform",
        7: "Steering of Roaming",
        8: "Steering of Roaming for I-WLAN",
    },
    StkCommand.SET_UP_CALL: {
        0: "Set up call, but only if not currently busy on another call",
        1: "Set up call, but only if not currently busy on another call, with redial",
        2: "Set up call, putting all other calls(if any) on hold",
        3: "Set up call, putting all other calls(if any) on hold, with redial",
        4: "Set up call, disconnecting all other calls(if any)",
        5: "Set up call, disconnecting all other calls(if any), with redial",
    },
    StkCommand.SEND_SHORT_MESSAGE: {
        0: "Packing not required",
        1: "SMS packing by the terminal required",
    },
    StkCommand.LAUNCH_BROWSER: {
        0: "Launch browser if not already launched",
        1: "Not used",
        2: "Use the existing browser (the browser shall not use the active existing secured session)",
        3: "Close the existing browser session and launch new browser session",
        4: "Not used",
    },
    StkCommand.PLAY_TONE: {
        0: "Use of vibrate alert is up to the terminal",
        1: "Vibrate alert, if available, with the tone",
    },
    StkCommand.PROVIDE_LOCAL_INFO: {
        0x00: "Location Information according to current NAA",
        0x01: "IMEI of the terminal",
        0x02: "Network Measurement results according to current NAA",
        0x03: "Date, time and time zone",
        0x04: "Language setting",
        0x05: "Reserved for GSM",
        0x06: "Access Technology(single access technology)",
        0x07: "ESN of the terminal",
        0x08: "IMEISV of the terminal",
        0x09: "Search Mode",
        0x0A: 'Charge State of the Battery(if class "g" is supported)',
        0x0B: "MEID of the terminal",
        0x0C: "reserved for 3GPP(current WSID)",
        0x0D: "Broadcast Network information according to current Broadcast Network Technology used",
        0x0E: "Multiple Access Technologies",
        0x0F: "Location Information for multiple access technologies",
        0x10: "Network Measurement results for multiple access technologies",
    },
    StkCommand.TIMER_MANAGEMENT: {
        0: "Start",
        1: "Deactivate",
        2: "Get current value",
    },
    StkCommand.GET_READER_STATUS: {
        0: "Card reader status",
        1: "Card reader identifier",
    },
    StkCommand.LANGUAGE_NOTIFICATION: {
        0: "Non-specific language notification",
        1: "Specific language notification",
    },
    StkCommand.SEND_DATA: {
        0: "Store data in Tx buffer",
        1: "Send data immediately",
    },
    StkCommand.DECLARE_SERVICE: {
        0: "Add a new service to the terminal service database",
        1: "Delete a service from the terminal service database",
    },
    StkCommand.SET_FRAMES: {
        0: "This value tells the terminal to draw a separator between every adjoining frame",
        1: "This value tells the terminal not to draw a separator between every adjoining frame",
    },
    StkCommand.ENCAPSULATED_SESSION_CONTROL: {
        0: "End encapsulated command session",
        1: "Request Master SA setup",
        2: "Request Connection SA setup",
        3: "Request Secure Channel Start",
        4: "Close Master and Connection SA, keep encapsulated command session",
    },
}

_PRIORITY_BITS = [
    (0x01, "Normal priority", "High priority"),
    (0x80, "Clear message after a delay", "Wait for user to clear message"),
]

# Qualifiers whose bits each contribute a sentence: (mask, when clear, when set).
_QUALIFIER_BITS: dict[StkCommand, list[tuple[int, str, str]]] = {
    StkCommand.DISPLAY_TEXT: _PRIORITY_BITS,
    StkCommand.DISPLAY_MM: _PRIORITY_BITS,
    StkCommand.GET_INKEY: [
        (0x01, "Digits (0 to 9, *, # and +) only", "Alphabet set"),
        (0x02, "SMS default alphabet", "UCS2 alphabet"),
        (
            0x04,
            "Character sets defined by bit 1 and bit 2 are enabled",
            'Character sets defined by bit 1 and bit 2 are disabled and the "Yes/No" response is requested',
        ),
        (
            0x08,
            "User response shall be displayed. The terminal may allow alteration and/or confirmation",
            "An immediate digit response (0 to 9, * and #) is requested",
        ),
        (0x80, "No help information available", "Help information available"),
    ],
    StkCommand.GET_INPUT: [
        (0x01, "Digits (0 to 9, *, # and +) only", "Alphabet set"),
        (0x02, "SMS default alphabet", "UCS2 alphabet"),
        (0x04, "Terminal may echo user input on the display", "User input shall not be revealed in any way"),
        (0x08, "User input to be in unpacked format", "User input to be in SMS packed format"),
        (0x80, "No help information available", "Help information available"),
    ],
    StkCommand.SELECT_ITEM: [
        (0x01, "Presentation type is not specified", "Presentation type is specified in bit 2"),
        (
            0x02,
            "Presentation as a choice of data values if bit 1 = '1'",
            "Presentation as a choice of navigation options if bit 1 is '1'",
        ),
        (0x04, "No selection preference", "Selection using soft key preferred"),
        (0x80, "No help information available", "Help information available"),
    ],
    StkCommand.SETUP_MENU: [
        (0x01, "No selection preference", "Selection using soft key preferred"),
        (0x80, "No help information available", "Help information available"),
    ],
    StkCommand.OPEN_CHANNEL: [
        (0x01, "On demand link establishment", "Immediate link establishment"),
        (0x02, "No automatic reconnection", "Automatic reconnection"),
        (0x04, "No background mode", "Immediate link establishment in background mode (bit 1 is ignored)"),
        (
            0x08,
            "No DNS server address(es) requested",
            "DNS server address(es) requested (for packet data service only)",
        ),
    ],
}

_TEXT_ENCODING_NAMES = {
    TextEncoding.SEVEN_BIT: "GSM default alphabet 7 bits packed",
    TextEncoding.EIGHT_BIT: "GSM default alphabet 8 bits",
    TextEncoding.SIXTEEN_BIT: "16 bits UCS2 alphabet",
}

_DURATION_UNIT_NAMES = {
    DurationUnit.MINUTES: "Minutes",
    DurationUnit.SECONDS: "Seconds",
    DurationUnit.TENTHS_OF_SECOND: "Tenths of second",
}

_RESULT_STATUS = {
    0x00: "Command performed successfully",
    0x01: "Command performed with partial comprehension",
    0x02: "Command performed, with missing information",
    0x03: "REFRESH performed with additional Efs read",
    0x04: "Command performed successfully, but requested icon could not be displayed",
    0x05: "Command performed, but modified by call control by NAA",
    0x06: "Command performed successfully, limited service",
    0x07: "Command performed with modification",
    0x08: "REFRESH performed but indicated NAA was not active",
    0x09: "Command performed successfully, tone not played",
    0x10: "Proactive UICC session terminated by the user",
    0x11: "Backward move in the proactive UICC session requested by the user",
    0x12: "No response from user",
    0x13: "Help information required by the user",
    0x14: "USSD or SS transaction terminated by the user",
    0x20: "Terminal currently unable to process command",
    0x21: "Network currently unable to process command",
    0x22: "User did not accept the proactive command",
    0x23: "User cleared down call before connection or network release",
    0x24: "Action in contradiction with the current timer state",
    0x25: "Interaction with call control by NAA, temporary problem",
    0x26: "Launch browser generic error code",
    0x27: "MMS temporary problem",
    0x30: "Command beyond terminal's capabilities",
    0x31: "Command type not understood by terminal",
    0x32: "Command data not understood by terminal",
    0x33: "Command number not known by terminal",
    0x34: "SS Return Error",
    0x35: "SMS RP-ERROR",
    0x36: "Error, required values are missing",
    0x37: "USSD Return Error",
    0x38: "MultipleCard commands error",
    0x39: "Interaction with call control by NAA, permanent problem",
    0x3A: "Bearer Independent Protocol error",
    0x3B: "Access Technology unable to process command",
    0x3C: "Frames error",
    0x3D: "MMS Error",
}

_NO_SPECIFIC_CAUSE = "No specific cause can be given"

_ADDITIONAL_STATUS = {
    0x20: {
        0x1: "Screen is busy",
        0x2: "Terminal currently busy on call",
        0x3: "ME currently busy on SS transaction",
        0x4: "No service",
        0x5: "Access control class bar",
        0x6: "Radio resource not granted",
        0x7: "Not in speech call",
        0x8: "ME currently busy on USSD transaction",
        0x9: "Terminal currently busy on SEND DTMF command",
        0xA: "No NAA active",
    },
    0x26: {
        0x1: "Bearer unavailable",
        0x2: "Browser unavailable",
        0x3: "Terminal unable to read the provisioning data",
        0x4: "Default URL unavailable",
    },
    0x38: {
        0x1: "Card reader removed or not present",
        0x2: "Card removed or not present",
        0x3: "Card reader busy",
        0x4: "Card powered off",
        0x5: "C-APDU format error",
        0x6: "Mute card",
        0x7: "Transmission error",
        0x8: "Protocol not supported",
        0x9: "Specified reader not valid",
    },
    0x39: {
        1: "Action not allowed",
        2: "The type of request has changed",
    },
    0x3A: {
        0x0: _NO_SPECIFIC_CAUSE,
        0x1: "No channel available",
        0x2: "Channel closed",
        0x3: "Channel identifier not valid",
        0x4: "Requested buffer size not available",
        0x5: "Security error (unsuccessful authentication)",
        0x6: "Requested UICC/terminal interface transport level not available",
        0x7: "Remote device is not reachable (not present, not physically connected, switched off, etc.)",
        0x8: "Service error (service not available on remote device)",
        0x9: "Service identifier unknown",
        0x10: "Port not available (applicable for OPEN CHANNEL related to UICC Server Mode) and Terminal Server Mode",
        0x11: (
            "Launch parameters missing or incorrect (applicable for OPEN CHANNEL or SEND DATA "
            "related to Terminal Server Mode)"
        ),
        0x12: "Application launch failed (applicable for SEND DATA related to Terminal Server Mode)",
    },
    0x3C: {
        1: "Frame identifier is not valid",
        2: "Number of frames beyond the terminal's capabilities",
        3: " No Frame defined",
        4: "Requested size not supported",
        5: "Default Active Frame is not valid",
    },
}

_COMMAND_NAMES = {
    StkCommand.REFRESH: "Refresh",
    StkCommand.MORE_TIME: "More Time",
    StkCommand.POLL_INTERVAL: "Poll Interval",
    StkCommand.POLLING_OFF: "Polling Off",
    StkCommand.SETUP_EVENT_LIST: "Setup Event List",
    StkCommand.SET_UP_CALL: "Setup Call",
    StkCommand.SEND_SS: "Send Short String",
    StkCommand.SEND_USSD: "Send USSD",
    StkCommand.SEND_SHORT_MESSAGE: "Send Short Message",
    StkCommand.SEND_DTMF: "Send DTMF",
    StkCommand.LAUNCH_BROWSER: "Launch Browser",
    StkCommand.GEOGRAPHICAL_LOCATION_REQUEST: "Geographical Location Request",
    StkCommand.PLAY_TONE: "Play Tone",
    StkCommand.DISPLAY_TEXT: "Display Text",
    StkCommand.GET_INKEY: "Get Inkey",
    StkCommand.GET_INPUT: "Get Input",
    StkCommand.SELECT_ITEM: "Select Item",
    StkCommand.SETUP_MENU: "Setup Menu",
    StkCommand.PROVIDE_LOCAL_INFO: "Provide Local Info",
    StkCommand.TIMER_MANAGEMENT: "Timer Management",
    StkCommand.SETUP_IDLE_MODE_TEXT: "Setup Idle Mode Text",
    StkCommand.CARD_APDU: "Card APDU",
    StkCommand.POWER_ON_CARD: "Power On Card",
    StkCommand.POWER_OFF_CARD: "Power Off Card",
    StkCommand.GET_READER_STATUS: "Get Reader Status",
    StkCommand.RUN_AT_COMMAND: "Run at Command",
    StkCommand.LANGUAGE_NOTIFICATION: "Language Notification",
    StkCommand.OPEN_CHANNEL: "Open Channel",
    StkCommand.CLOSE_CHANNEL: "Close Channel",
    StkCommand.RECEIVE_DATA: "Receive Data",
    StkCommand.SEND_DATA: "Send Data",
    StkCommand.GET_CHANNEL_STATUS: "Get Channel Status",
    StkCommand.SERVICE_SEARCH: "Service Search",
    StkCommand.GET_SERVICE_INFORMATION: "Get Service Information",
    StkCommand.DECLARE_SERVICE: "Declare Service",
    StkCommand.SET_FRAMES: "Set Frames",
    StkCommand.GET_FRAMES_STATUS: "Get Frames Status",
    StkCommand.RETRIEVE_MM: "Retrieve Multimedia Message",
    StkCommand.SUBMIT_MM: "Submit Multimedia Message",
    StkCommand.DISPLAY_MM: "Display Multimedia Message",
    StkCommand.ACTIVATE: "Activate",
    StkCommand.CONTACTLESS_STATE_CHANGED: "Contactless State Changed",
    StkCommand.COMMAND_CONTAINER: "Command Container",
    StkCommand.ENCAPSULATED_SESSION_CONTROL: "Encapsulated Session Control",
    StkCommand.END_OF_PROACTIVE_SESSION: "End of Proactive Session",
}

_FIXED_DEVICE_NAMES = {
    StkDevice.KEYPAD: "Keypad",
    StkDevice.DISPLAY: "Display",
    StkDevice.EARPIECE: "Earpiece",
    StkDevice.UICC: "SIM",
    StkDevice.TERMINAL: "Terminal",
    StkDevice.NETWORK: "Network",
}

# Device ranges: (base, highest offset, label).
_DEVICE_RANGES = [
    (StkDevice.ADDITIONAL_CARD_READER, 7, "Additional card reader"),
    (StkDevice.CHANNEL_IDENTIFIER, 7, "Channel identifier"),
    (StkDevice.ECAT_CLIENT_IDENTIFIER, 15, "eCat client identifier"),
]

_TAG_NAMES = {
    StkTag.PROACTIVE: "Proactive",
    StkTag.COMPREHENSION_REQUIRED: "(comprehension required)",
    StkTag.COMMAND_DETAILS: "Command Details",
    StkTag.DEVICE_IDENTITIES: "Device Identities",
    StkTag.RESULT: "Result",
    StkTag.DURATION: "Duration",
    StkTag.ALPHA_IDENTIFIER: "Alpha Identifier",
    StkTag.ADDRESS: "Address",
    StkTag.CAPABILITY_CONFIGURATION_PARAMETERS: "Capability Configuration Parameters",
    StkTag.CALLED_PARTY_SUBADDRESS: "Called Party Subaddress",
    StkTag.SHORT_STRING: "Short String",
    StkTag.SMS_TPDU: "SMS TPDU",
    StkTag.CELL_BROADCAST_PAGE: "Cell Broadcast Page",
    StkTag.TEXT_STRING: "Text String",
    StkTag.TONE: "Tone / eCat Client Profile",
    StkTag.ITEM: "Item / eCAT Client Identity",
    StkTag.ITEM_IDENTIFIER: "Item Identifier/ Encapsulated Envelope",
    StkTag.RESPONSE_LENGTH: "Response Length",
    StkTag.FILE_LIST: "File List",
    StkTag.LOCATION_INFORMATION: "Location Information",
    StkTag.IMEI: "IMEI",
}


def response_tag_name(tag: int) -> str:
    """Name of a tag found in a file control parameters response."""
    return _RESPONSE_TAG_NAMES.get(int(tag), "Unknown Tag")


def tone_name(tone: int) -> str:
    """Name of a PLAY TONE tone value."""
    return _TONE_NAMES.get(int(tone), "Unknown tone")


def command_qualifier_description(command: int, qualifier: int) -> str:
    """Describe the qualifier byte of a proactive command.

    Qualifiers without a defined meaning are shown as two hex digits.
    """
    command = int(command)
    qualifier = int(qualifier)
    table = _QUALIFIER_TABLES.get(command)
    if table is not None and qualifier in table:
        return table[qualifier]
    bits = _QUALIFIER_BITS.get(command)
    if bits is not None:
        return ". ".join(on if qualifier & mask else off for mask, off, on in bits)
    return f"{qualifier:02X}"


def text_encoding_name(encoding: int) -> str:
    """Name of a text string data coding scheme."""
    try:
        return _TEXT_ENCODING_NAMES[TextEncoding(int(encoding))]
    except ValueError:
        raise ValueError(f"unknown text encoding: {int(encoding):#04x}") from None


def duration_unit_name(unit: int) -> str:
    """Name of a duration time unit."""
    try:
        return _DURATION_UNIT_NAMES[DurationUnit(int(unit))]
    except ValueError:
        raise ValueError(f"unknown duration unit: {int(unit):#04x}") from None


def result_status_description(code: int) -> str:
    """Describe the general result of a terminal response."""
    return _RESULT_STATUS.get(int(code), "Unknown status code")


def additional_status_description(status: int, code: int) -> str:
    """Describe the additional information byte that follows a result."""
    return _ADDITIONAL_STATUS.get(int(status), {}).get(int(code), _NO_SPECIFIC_CAUSE)


def command_name(command: int) -> str:
    """Name of a proactive command type."""
    return _COMMAND_NAMES.get(int(command), "Unknown")


def device_name(device: int) -> str:
    """Name of a device identity."""
    device = int(device)
    if device in _FIXED_DEVICE_NAMES:
        return _FIXED_DEVICE_NAMES[device]
    for base, highest, label in _DEVICE_RANGES:
        if base <= device <= base + highest:
            return f"{label} {device - base}"
    return "Unknown device"


def tag_name(tag: int) -> str:
    """Name of a SIM toolkit data object tag."""
    return _TAG_NAMES.get(int(tag), "Unknown Tag")