"""Ethernet frame capture, summaries and filtering."""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

import psutil

_ETHERNET_HEADER = 14
_IPV4_MIN_HEADER = 20
_ETHERTYPE_IPV4 = 0x0800
_ETH_P_ALL = 0x0003
_MAX_FRAME = 65535

_PROTOCOL_NAMES = {
    1: "ICMP",
    2: "IGMP",
    6: "TCP",
    17: "UDP",
}


@dataclass(frozen=True)
class PacketInfo:
    """A captured frame and a one-line summary of it."""

    summary: str
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "PacketInfo":
        data = bytes(data)
        return cls(f"Packet: {len(data)} bytes", data)


def _mac(raw: bytes) -> str:
    return ":".join(f"{b:02x}" for b in raw)


def parse_packet_info(data: bytes) -> tuple[str, str, str]:
    """Return (source, destination, protocol) for an Ethernet frame."""
    data = bytes(data)
    if len(data) < _ETHERNET_HEADER:
        return ("?", "?", "?")
    destination, source = data[0:6], data[6:12]
    ethertype = int.from_bytes(data[12:14], "big")
    payload = data[_ETHERNET_HEADER:]
    if ethertype == _ETHERTYPE_IPV4 and len(payload) >= _IPV4_MIN_HEADER:
        protocol = payload[9]
        src = str(ipaddress.IPv4Address(payload[12:16]))
        dst = str(ipaddress.IPv4Address(payload[16:20]))
        name = _PROTOCOL_NAMES.get(protocol, f"IpNextHeaderProtocol({protocol})")
        return (src, dst, name)
    return (_mac(source), _mac(destination), f"EtherType({ethertype})")


def matches_filter(data: bytes, filter_text: str) -> bool:
    """True if the filter is empty or occurs, case-insensitively, in a parsed field."""
    needle = filter_text.lower()
    if not needle:
        return True
    return any(needle in field.lower() for field in parse_packet_info(data))


def filtered_rows(
    packets: Iterable[PacketInfo], filter_text: str
) -> list[tuple[int, str, str, str, int]]:
    """Rows of (seq, source, destination, protocol, length) that pass the filter."""
    rows = []
    for seq, packet in enumerate(packets, start=1):
        if not matches_filter(packet.data, filter_text):
            continue
        src, dst, proto = parse_packet_info(packet.data)
        rows.append((seq, src, dst, proto, len(packet.data)))
    return rows


def format_hex(data: bytes) -> str:
    """Bytes as a bracketed list of upper-case two-digit hex values."""
    return "[" + ", ".join(f"{b:02X}" for b in bytes(data)) + "]"


def save_packet(data: bytes, seq: int, directory: str | Path = "packets") -> Path:
    """Write the hex dump of a packet to <directory>/packet<seq>.txt."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / f"packet{seq}.txt"
    path.write_bytes(format_hex(data).encode("ascii"))
    return path


def list_interfaces() -> dict[str, list[str]]:
    """Map each network interface name to its IP addresses."""
    families = {socket.AF_INET, socket.AF_INET6}
    return {
        name: [addr.address for addr in addrs if addr.family in families]
        for name, addrs in psutil.net_if_addrs().items()
    }


def capture(interface: str) -> Iterator[PacketInfo]:
    """Yield frames received on an interface until reading fails."""
    family = getattr(socket, "AF_PACKET", None)
    if family is None:
        raise OSError("raw packet capture is not supported on this platform")
    sock = socket.socket(family, socket.SOCK_RAW, socket.ntohs(_ETH_P_ALL))
    try:
        sock.bind((interface, 0))
        while True:
            try:
                frame = sock.recv(_MAX_FRAME)
            except OSError:
                return
            yield PacketInfo.from_bytes(frame)
    finally:
        sock.close()