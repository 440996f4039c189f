import pytest

from scetrace.stk import (
    DurationUnit,
    ResponseTag,
    StkCommand,
    StkDevice,
    StkTag,
    TextEncoding,
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


def test_response_tag_names():
    assert response_tag_name(ResponseTag.FCP_TEMPLATE) == "FCP Template"
    assert response_tag_name(0x8A) == "Life Cycle Status Information"
    assert response_tag_name(0x00) == "Unknown Tag"


def test_every_response_tag_is_named():
    names = [response_tag_name(tag) for tag in ResponseTag]
    assert "Unknown Tag" not in names
    assert len(set(names)) == len(list(ResponseTag))


def test_tone_names():
    assert tone_name(0x01) == "Dial tone"
    assert tone_name(0x47) == "Melody 8"
    assert tone_name(0x09) == "Unknown tone"


def test_table_qualifier():
    assert command_qualifier_description(StkCommand.REFRESH, 4) == "UICC Reset"
    assert command_qualifier_description(StkCommand.TIMER_MANAGEMENT, 2) == "Get current value"


def test_reserved_qualifier_is_hex():
    assert command_qualifier_description(StkCommand.REFRESH, 0xFF) == "FF"


def test_unknown_command_qualifier_is_hex_and_zero_padded():
    result = command_qualifier_description(StkCommand.MORE_TIME, 0x0A)
    assert len(result) == 2
    assert int(result, 16) == 0x0A


def test_display_text_bits():
    low = command_qualifier_description(StkCommand.DISPLAY_TEXT, 0x00)
    high = command_qualifier_description(StkCommand.DISPLAY_TEXT, 0x81)
    assert low.startswith("Normal priority")
    assert low.endswith("Clear message after a delay")
    assert high.startswith("High priority")
    assert high.endswith("Wait for user to clear message")


def test_display_mm_matches_display_text():
    for qualifier in (0x00, 0x01, 0x80, 0x81):
        assert command_qualifier_description(StkCommand.DISPLAY_MM, qualifier) == (
            command_qualifier_description(StkCommand.DISPLAY_TEXT, qualifier)
        )


def test_open_channel_bits():
    text = command_qualifier_description(StkCommand.OPEN_CHANNEL, 0x02)
    assert text.startswith("On demand link establishment")
    assert "Automatic reconnection" in text
    assert "No automatic reconnection" not in text


def test_get_inkey_help_bit():
    assert command_qualifier_description(StkCommand.GET_INKEY, 0x80).endswith("Help information available")
    assert command_qualifier_description(StkCommand.GET_INKEY, 0x00).endswith("No help information available")


def test_text_encoding_names():
    assert text_encoding_name(TextEncoding.EIGHT_BIT) == "GSM default alphabet 8 bits"
    assert text_encoding_name(0x08) == "16 bits UCS2 alphabet"
    with pytest.raises(ValueError):
        text_encoding_name(0x01)


def test_duration_unit_names():
    assert duration_unit_name(DurationUnit.SECONDS) == "Seconds"
    assert duration_unit_name(2) == "Tenths of second"
    with pytest.raises(ValueError):
        duration_unit_name(3)


def test_result_status():
    assert result_status_description(0x00) == "Command performed successfully"
    assert result_status_description(0x3D) == "MMS Error"
    assert result_status_description(0xFF) == "Unknown status code"


def test_additional_status():
    assert additional_status_description(0x20, 0x1) == "Screen is busy"
    assert additional_status_description(0x3A, 0x10).startswith("Port not available")
    assert additional_status_description(0x3C, 3) == " No Frame defined"


def test_additional_status_fallback():
    assert additional_status_description(0x00, 0x01) == "No specific cause can be given"
    assert additional_status_description(0x20, 0x0B) == "No specific cause can be given"


def test_command_names():
    assert command_name(StkCommand.SEND_SS) == "Send Short String"
    assert command_name(0x81) == "End of Proactive Session"
    assert command_name(0x99) == "Unknown"


def test_every_command_is_named():
    names = [command_name(command) for command in StkCommand]
    assert "Unknown" not in names
    assert len(set(names)) == len(list(StkCommand))


def test_device_names():
    assert device_name(StkDevice.UICC) == "SIM"
    assert device_name(StkDevice.NETWORK) == "Network"
    assert device_name(0x13) == "Additional card reader 3"
    assert device_name(0x04) == "Unknown device"


def test_device_ranges_cover_offsets():
    assert device_name(StkDevice.CHANNEL_IDENTIFIER).startswith("Channel identifier")
    assert device_name(StkDevice.ECAT_CLIENT_IDENTIFIER + 15).startswith("eCat client identifier")
    assert device_name(StkDevice.CHANNEL_IDENTIFIER + 8) == "Unknown device"


def test_tag_names():
    assert tag_name(StkTag.COMMAND_DETAILS) == "Command Details"
    assert tag_name(0x0E) == "Tone / eCat Client Profile"
    assert tag_name(0x0A) == "Unknown Tag"


def test_every_tag_is_named():
    names = [tag_name(tag) for tag in StkTag]
    assert "Unknown Tag" not in names
    assert len(set(names)) == len(list(StkTag))