# scetrace

Tools for making sense of the traffic between a SIM card and a phone, as
captured by a SIMtrace USB sniffer.

The package splits the raw byte stream into ISO 7816-4 APDU commands with
their status words, and explains what they mean: file selection and record
access, PIN verification, status words, and the SIM Toolkit (CAT) exchanges
such as proactive commands, terminal profiles, envelopes and terminal
responses.

## Installation

```
pip install .
```

It has no dependencies outside the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package puts a `scetrace` command on your path. It reads one
or more trace files, each a text file of hexadecimal byte pairs holding
SIMtrace USB frames, and prints one line per APDU command and per
answer-to-reset:

```
scetrace trace.txt
scetrace --details trace.txt other.txt
```

With `-d` / `--details` each command is followed by its interpretation as
key-value pairs. A warning goes to standard error when a trace starts in the
middle of a session. A file that cannot be read, or whose frames are shorter
than their headers say, is reported on standard error and makes the command
exit with status 1.

## Library use

### Splitting a byte stream into commands

`scetrace.splitter.ApduSplitter` takes bytes as they arrive, in pieces of any
size, and calls your callback each time a full command and its status word
have been seen. The callback receives an `ApduCommand` and the monotonic
time, in nanoseconds, at which the command's first byte arrived:

```python
from scetrace.splitter import ApduSplitter

def on_command(command, timestamp):
    print(command.instruction_name(), command.protocol_string())
    print(command.status_word_description())

splitter = ApduSplitter(on_command)
splitter.split_input(bytes.fromhex("a0a4000002a43f00"))
splitter.split_input(bytes.fromhex("9000"))
```

This prints `Select A0 A4 00 00 02 3F 00 (90 00)` and
`Command executed successfully.`. Call `splitter.reset()` to throw away a
half-read command and start again from the class byte.

### Commands

`scetrace.apdu.ApduCommand` holds CLA, INS, P1, P2, the data bytes and SW1
SW2, with its `CommandType`. Besides `protocol_string()`,
`instruction_name()` and `status_word_description()`, its
`application_map` is a dictionary, sorted by key, that explains the command
(selected file, record mode, FCP response objects, PIN reference, channel,
terminal profile, proactive command details, device identities, results and
so on), or `None` for instructions it does not interpret.
`InstructionCode` lists the instruction codes it knows.

### Decoding SIMtrace USB frames

`scetrace.simtrace.TraceProcessor` understands the frames the sniffer sends
over USB. It unpacks the header (`SimTraceHeader.from_bytes`), separates
frames that arrived glued together, reports the answer-to-reset, and feeds
the APDU payload to a splitter. A frame shorter than its header says raises
`CorruptedBufferError`. All callbacks are optional:

```python
from scetrace.simtrace import TraceProcessor

processor = TraceProcessor(
    on_apdu=lambda output, command: print(output),
    on_atr=print,
    on_raw=lambda raw: None,
    on_mid_session=lambda: print("trace started mid-session"),
)
processor.process_input(frame_bytes)
```

Each APDU line carries the time since the first frame, formatted by
`format_elapsed` as hours, minutes, seconds, milliseconds and microseconds.
`processor.reset()` starts a new session. The module also defines the
sniffer's USB vendor and product IDs and endpoint numbers.

### Looking up SIM Toolkit values

`scetrace.stk` holds the toolkit enumerations and their readable names:
`command_name`, `command_qualifier_description`, `device_name`, `tag_name`,
`response_tag_name`, `tone_name`, `text_encoding_name`,
`duration_unit_name`, `result_status_description` and
`additional_status_description`.
`scetrace.terminal_profile.decode_terminal_profile` lists which toolkit
facilities a terminal profile claims to support, along with the numeric
fields it carries.

### Saved traces

`scetrace.hexfile.open_file` reads a text file of hexadecimal byte pairs
back into bytes, skipping empty lines and ignoring an unpaired last digit on
a line; `save_file` writes text out.

### USB errors

`scetrace.errors.usb_error_message` turns a `UsbError` code into a readable
message; passing the success code raises `ValueError`, since there is
nothing to describe.

### Update checks

`scetrace.updates.UpdateManager` runs an external checker command at most
once per `CheckFrequency` period, remembers the date of the last check and
any skipped release in a JSON settings file, and lets your callback choose
an `UpdateAction`; choosing `UPDATE` starts the checker's program with
`--updater`. `extract_version` pulls the version number out of the checker's
output.

## What it does not do

The package does not open or read the USB sniffer itself: it decodes frames
and byte streams you hand it, and the command line works on saved trace
files only. There is no graphical viewer.