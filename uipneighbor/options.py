"""Compile-time style configuration for a small TCP/IP stack."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

__all__ = ["ByteOrder", "Options"]


class ByteOrder(enum.IntEnum):
    """Byte order of the CPU the stack runs on."""

    LITTLE_ENDIAN = 3412
    BIG_ENDIAN = 1234


@dataclass(frozen=True)
class Options:
    """Stack configuration with the stock defaults.

    Derived values such as the TCP maximum segment size are exposed as
    properties. Use :meth:`with_overrides` to get a tuned copy.
    """

    # Static addressing
    fixed_addr: bool = False
    ping_addr_conf: bool = False
    fixed_eth_addr: bool = False

    # IP
    ttl: int = 64
    reassembly: bool = False
    reass_max_age: int = 40

    # UDP
    udp: bool = False
    udp_checksums: bool = False
    udp_conns: int = 10

    # TCP
    active_open: bool = True
    max_connections: int = 10
    max_listen_ports: int = 20
    urgent_data: bool = False
    rto: int = 3
    max_rtx: int = 8
    max_syn_rtx: int = 5
    receive_window_size: int | None = None
    time_wait_timeout: int = 120
    # Combined IPv4 and TCP header length.
    tcpip_hlen: int = 40

    # ARP
    arptab_size: int = 8
    arp_max_age: int = 120

    # Neighbor table
    neighbor_entries: int = 8

    # General
    buffer_size: int = 400
    statistics: bool = False
    logging: bool = False
    broadcast: bool = False
    llh_len: int = 14
    byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN

    def __post_init__(self) -> None:
        object.__setattr__(self, "byte_order", ByteOrder(self.byte_order))

    @property
    def tcp_mss(self) -> int:
        """TCP maximum segment size that fits in the packet buffer."""
        return self.buffer_size - self.llh_len - self.tcpip_hlen

    @property
    def receive_window(self) -> int:
        """Advertised receive window; defaults to the TCP MSS."""
        if self.receive_window_size is None:
            return self.tcp_mss
        return self.receive_window_size

    def with_overrides(self, **kwargs) -> Options:
        """Return a copy with the given fields replaced.

        Unknown field names raise :class:`TypeError`.
        """
        return dataclasses.replace(self, **kwargs)