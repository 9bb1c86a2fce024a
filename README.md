# uipneighbor

A small, fixed-size table of link-local neighbours. It maps IP addresses
(IPv4 or IPv6) to six-octet Ethernet link addresses. Entries age over time.
When the table is full, the oldest entry is replaced. The package also holds
a set of stack configuration options with their usual defaults.

## Installation

```
pip install .
```

## Neighbour table

```python
from uipneighbor.neighbor import LinkAddress, NeighborTable

table = NeighborTable(8)                  # default size is 8
mac = LinkAddress.parse("02:00:00:00:00:01")
table.add("192.168.0.10", mac)

table.lookup("192.168.0.10")   # -> LinkAddress for 02:00:00:00:00:01
table.lookup("192.168.0.99")   # -> None
str(mac)                       # -> "02:00:00:00:00:01"

table.periodic()               # age every entry in use by one tick
table.update("192.168.0.10")   # set that entry's age back to zero
len(table)                     # number of entries in use
list(table)                    # the NeighborEntry objects in use
table.reset()                  # mark every entry as unused
```

IP addresses may be given as strings or as `ipaddress` objects. Link
addresses may be given as `LinkAddress`, a colon-separated hex string or six
bytes. Invalid addresses raise `ValueError`. So does a table size below one.

Each `NeighborEntry` has `ipaddr`, `addr` and `time` fields. `time` counts
`periodic` ticks since the entry was added or updated. Once `time` reaches
`MAX_TIME` (128), the entry's `in_use` is false and its slot is free for
reuse. An aged-out entry keeps its addresses, so `lookup` still finds it
until its slot is taken over. `update` also finds such an entry and sets its
age back to zero.

When an address is added, the table takes the first of these that it finds,
scanning the slots in order:

- a free slot,
- the slot that already holds that address,
- otherwise the slot with the oldest entry.

Each addition is logged at debug level through the `uipneighbor.neighbor`
logger.

## Options

```python
from uipneighbor.options import ByteOrder, Options

opts = Options()
opts.tcp_mss                              # buffer_size - llh_len - tcpip_hlen: 346
small = opts.with_overrides(buffer_size=200)
small.receive_window                      # equals tcp_mss unless receive_window_size is set
small.byte_order is ByteOrder.LITTLE_ENDIAN
```

`Options` is a frozen dataclass. `with_overrides` returns a new copy with the
named fields changed. An unknown field name raises `TypeError`. `tcp_mss` and
`receive_window` are read-only properties.

## What this package does not do

The table only stores and ages addresses. It does not send or receive packets,
issue ARP or neighbour-discovery requests, or run a timer of its own; call
`periodic` yourself. `Options` is a plain record of settings. Nothing in the
package reads it, and `NeighborTable` does not take its size from
`Options.neighbor_entries` unless you pass that value in.

## Running the tests

```
pip install .[test]
pytest
```