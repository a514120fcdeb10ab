# turf

A small toolkit for listing the processes running on a machine and for
decoding the Ethernet frames passing through it, plus a few small utilities.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Listing processes

```
turf
```

Prints one line per running process in the form `PID: name`, for at most
1024 processes (`turf.cli.MAX_PIDS`). A process whose name cannot be read is
shown as `Unknown`. A process that cannot be opened is reported on standard
error as `failed to open PID: reason`. The command takes no options besides
`--help`.

From Python:

```python
from turf.cli import enum_proc
from turf.process import Process

for pid in enum_proc():
    with Process.open(pid) as proc:
        print(pid, proc.name)
```

`Process.open` raises `OSError` (`ProcessLookupError`, `PermissionError`)
when the process cannot be opened, and `ValueError` for a pid outside the
32-bit range. The name is looked up once, when the process is opened, and
cut to 64 characters; `get_process_name()` queries it again. After `close()`
(or leaving the `with` block) further queries raise `ValueError`.

## Inspecting packets

`turf.packets` decodes raw Ethernet frames:

```python
from turf.packets import PacketInfo, parse_packet_info, format_hex

info = PacketInfo.from_bytes(frame)
src, dst, proto = parse_packet_info(info.data)
print(info.summary, src, dst, proto)
print(format_hex(info.data))
```

`parse_packet_info` returns IPv4 source and destination addresses and the
protocol name (`TCP`, `UDP`, `ICMP`, `IGMP`, or `IpNextHeaderProtocol(n)`)
for IPv4 frames; for other frames it returns the MAC addresses and
`EtherType(n)`; for frames shorter than an Ethernet header it returns
`("?", "?", "?")`.

Also available:

- `matches_filter(data, filter_text)` and `filtered_rows(packets, filter_text)`
  for case-insensitive filtering on source, destination or protocol; rows are
  `(seq, source, destination, protocol, length)` with `seq` counted from 1.
- `save_packet(data, seq, directory="packets")` writes a frame's hex dump to
  `<directory>/packet<seq>.txt` and returns the path.
- `list_interfaces()` maps each network interface name to its IP addresses.
- `capture(interface)` yields `PacketInfo` objects read from an interface
  until reading fails. It needs raw `AF_PACKET` sockets (Linux) and the
  privileges to open them; elsewhere it raises `OSError`.

## Editing a text file

`turf.file_editor.file_editor(file_path="save_state.txt", stdin=None,
stdout=None)` prints a file's contents and asks whether to replace them
(`Y`/`N`, case-insensitive; other answers are echoed and asked again). On
`Y` it reads one line and writes it as the new contents. It returns the
contents after the session. `read_file` returns a file's text.

## Other modules

- `turf.contact`: a `Contact` record (`from_info`, `get_info`, `card`,
  `print_member_age`) and `say_hello`.
- `turf.datatypes`: `floor_divide`, `compare_items`, `GenericContainer`,
  `Foo`, and `describe_answer` / `describe_state` for `SuperBoolean` answers
  and `StateKind` device states.

## What it does not do

There is no graphical interface and no long-running capture session: packet
helpers are functions to call from Python. Frames cannot be resent, and
process memory cannot be read or edited; `Process` only reports a process's
name.