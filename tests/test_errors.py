import pytest

from scetrace.errors import UsbError, usb_error_message


def test_success_is_not_an_error():
    with pytest.raises(ValueError):
        usb_error_message(UsbError.SUCCESS)


def test_success_as_plain_int_raises():
    with pytest.raises(ValueError):
        usb_error_message(int(UsbError.SUCCESS))


@pytest.mark.parametrize(
    "code, message",
    [
        (UsbError.ACCESS, "Access denied (insufficient permissions)"),
        (UsbError.NO_DEVICE, "No such device (it may have been disconnected)"),
        (UsbError.TIMEOUT, "Operation timed out"),
        (UsbError.OTHER, "An unknown error occurred"),
        (UsbError.PIPE, "Pipe error"),
    ],
)
def test_known_messages(code, message):
    assert usb_error_message(code) == message


def test_plain_int_accepted():
    assert usb_error_message(int(UsbError.BUSY)) == "Resource busy"


def test_every_error_has_a_distinct_message():
    messages = [usb_error_message(code) for code in UsbError if code is not UsbError.SUCCESS]
    assert all(messages)
    assert len(set(messages)) == len(messages)


def test_unknown_code_gives_empty_string():
    assert usb_error_message(12345) == ""