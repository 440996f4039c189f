"""Human-readable descriptions of USB transfer library error codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["UsbError", "usb_error_message"]


class UsbError(IntEnum):
    """Error codes reported by the USB access layer."""

    SUCCESS = 0
    IO = -1
    INVALID_PARAM = -2
    ACCESS = -3
    NO_DEVICE = -4
    NOT_FOUND = -5
    BUSY = -6
    TIMEOUT = -7
    OVERFLOW = -8
    PIPE = -9
    INTERRUPTED = -10
    NO_MEM = -11
    NOT_SUPPORTED = -12
    OTHER = -99


_MESSAGES: dict[UsbError, str] = {
    UsbError.IO: "Input/output error",
    UsbError.INVALID_PARAM: "Invalid parameter",
    UsbError.ACCESS: "Access denied (insufficient permissions)",
    UsbError.NO_DEVICE: "No such device (it may have been disconnected)",
    UsbError.NOT_FOUND: "Entity not found",
    UsbError.BUSY: "Resource busy",
    UsbError.TIMEOUT: "Operation timed out",
    UsbError.OVERFLOW: "Overflow",
    UsbError.PIPE: "Pipe error",
    UsbError.INTERRUPTED: "System call interrupted (perhaps due to signal)",
    UsbError.NO_MEM: "Insufficient memory",
    UsbError.NOT_SUPPORTED: "Operation not supported or unimplemented on this platform",
    UsbError.OTHER: "An unknown error occurred",
}


def usb_error_message(error: int) -> str:
    """Describe a USB error code.

    Raises ValueError for the success code, which is not an error.
    Codes that are not known yield an empty string.
    """
    try:
        code = UsbError(int(error))
    except ValueError:
        return ""
    if code is UsbError.SUCCESS:
        raise ValueError("USB command completed successfully. There is no error code")
    return _MESSAGES[code]