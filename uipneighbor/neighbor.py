"""Table of link-local neighbors mapping IP addresses to link addresses."""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["MAX_TIME", "DEFAULT_ENTRIES", "LinkAddress", "NeighborEntry", "NeighborTable"]

MAX_TIME = 128
DEFAULT_ENTRIES = 8

_log = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class LinkAddress:
    """A six-octet Ethernet link address."""

    octets: bytes

    def __post_init__(self) -> None:
        octets = bytes(self.octets)
        if len(octets) != 6:
            raise ValueError(f"link address needs 6 octets, got {len(octets)}")
        object.__setattr__(self, "octets", octets)

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self.octets)

    @staticmethod
    def parse(text: str) -> LinkAddress:
        """Parse a colon-separated hex address such as ``02:00:00:00:00:01``."""
        parts = text.strip().split(":")
        if len(parts) != 6:
            raise ValueError(f"invalid link address: {text!r}")
        try:
            values = [int(part, 16) for part in parts]
        except ValueError:
            raise ValueError(f"invalid link address: {text!r}") from None
        if any(not part or len(part) > 2 for part in parts):
            raise ValueError(f"invalid link address: {text!r}")
        return LinkAddress(bytes(values))


@dataclass
class NeighborEntry:
    """One slot of the table; ``time`` counts periodic ticks since last use."""

    ipaddr: IPAddress | None = None
    addr: LinkAddress | None = None
    time: int = MAX_TIME

    @property
    def in_use(self) -> bool:
        """True while the entry has not aged out."""
        return self.time < MAX_TIME


def _to_ip(value) -> IPAddress:
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return value
    return ipaddress.ip_address(value)


def _to_link(value) -> LinkAddress:
    if isinstance(value, LinkAddress):
        return value
    if isinstance(value, str):
        return LinkAddress.parse(value)
    return LinkAddress(bytes(value))


class NeighborTable:
    """Fixed-size neighbor cache with age-based replacement.

    Entries age one step per :meth:`periodic` call up to ``MAX_TIME``.
    An aged-out entry becomes free for reuse but keeps its addresses,
    so :meth:`lookup` still finds it until the slot is taken over.
    """

    def __init__(self, size: int = DEFAULT_ENTRIES) -> None:
        if size < 1:
            raise ValueError("neighbor table needs at least one entry")
        self.size = size
        self._entries = [NeighborEntry() for _ in range(size)]

    def __len__(self) -> int:
        return sum(1 for entry in self._entries if entry.in_use)

    def __iter__(self) -> Iterator[NeighborEntry]:
        return (entry for entry in self._entries if entry.in_use)

    def reset(self) -> None:
        """Mark every entry as unused."""
        for entry in self._entries:
            entry.time = MAX_TIME

    def periodic(self) -> None:
        """Age every entry by one tick."""
        for entry in self._entries:
            if entry.time < MAX_TIME:
                entry.time += 1

    def add(self, ipaddr, addr) -> None:
        """Record ``addr`` as the link address of ``ipaddr``.

        Takes the first free slot, the slot already holding ``ipaddr``,
        or failing both the oldest entry.
        """
        ip = _to_ip(ipaddr)
        link = _to_link(addr)
        _log.debug("Adding neighbor with link address %s", link)

        chosen = self._entries[0]
        oldest_time = 0
        for entry in self._entries:
            if entry.time == MAX_TIME or entry.ipaddr == ip:
                chosen = entry
                break
            if entry.time > oldest_time:
                chosen = entry
                oldest_time = entry.time

        chosen.time = 0
        chosen.ipaddr = ip
        chosen.addr = link

    def _find(self, ipaddr) -> NeighborEntry | None:
        ip = _to_ip(ipaddr)
        return next((e for e in self._entries if e.ipaddr == ip), None)

    def update(self, ipaddr) -> None:
        """Refresh the age of the entry for ``ipaddr``, if any."""
        entry = self._find(ipaddr)
        if entry is not None:
            entry.time = 0

    def lookup(self, ipaddr) -> LinkAddress | None:
        """Return the link address stored for ``ipaddr``, or None."""
        entry = self._find(ipaddr)
        return entry.addr if entry is not None else None