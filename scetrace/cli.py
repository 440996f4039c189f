"""Command line entry point: decode saved SIM traces."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from scetrace.apdu import ApduCommand
from scetrace.hexfile import open_file
from scetrace.simtrace import CorruptedBufferError, TraceProcessor

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scetrace",
        description="Decode SIM card traces saved as hexadecimal tracer frames.",
    )
    parser.add_argument("files", nargs="+", help="trace files to decode")
    parser.add_argument(
        "-d",
        "--details",
        action="store_true",
        help="show the interpretation of each command",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Decode each trace file and print its commands."""
    args = _build_parser().parse_args(argv)

    def on_apdu(output: str, command: ApduCommand) -> None:
        print(output)
        if args.details and command.application_map is not None:
            for key, value in command.application_map.items():
                text = value.replace("\n", "\n      ")
                print(f"    {key}: {text}")

    def on_mid_session() -> None:
        print(
            "warning: trace started mid-session; commands may be split incorrectly",
            file=sys.stderr,
        )

    processor = TraceProcessor(on_apdu=on_apdu, on_atr=print, on_mid_session=on_mid_session)
    status = 0
    for path in args.files:
        processor.reset()
        try:
            data = open_file(path)
        except OSError as error:
            print(f"scetrace: {path}: {error.strerror or error}", file=sys.stderr)
            status = 1
            continue
        if not data:
            continue
        try:
            processor.process_input(data)
        except CorruptedBufferError as error:
            print(f"scetrace: {path}: {error}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())