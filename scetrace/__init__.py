"""Decode SIM card APDU traffic captured by a SIMtrace sniffer."""

__version__ = "1.0.0"