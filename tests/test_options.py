import dataclasses

import pytest

from uipneighbor.options import ByteOrder, Options


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3412, ByteOrder.LITTLE_ENDIAN), (1234, ByteOrder.BIG_ENDIAN)],
)
def test_byte_order_values(value, expected):
    opts = Options(byte_order=value)
    assert opts.byte_order is expected
    assert int(opts.byte_order) == value


def test_documented_defaults():
    opts = Options()
    assert opts.ttl == 64
    assert opts.buffer_size == 400
    assert opts.llh_len == 14
    assert opts.max_connections == 10
    assert opts.max_listen_ports == 20
    assert opts.arptab_size == 8
    assert opts.arp_max_age == 120
    assert opts.time_wait_timeout == 120
    assert opts.udp_conns == 10
    assert opts.rto == 3
    assert opts.max_rtx == 8
    assert opts.max_syn_rtx == 5
    assert opts.active_open is True
    assert opts.udp is False
    assert opts.byte_order is ByteOrder.LITTLE_ENDIAN


def test_tcp_mss_tracks_buffer_size():
    base = Options()
    bigger = base.with_overrides(buffer_size=base.buffer_size + 100)
    assert bigger.tcp_mss - base.tcp_mss == 100


def test_tcp_mss_tracks_link_header():
    base = Options()
    slip = base.with_overrides(llh_len=0)
    assert slip.tcp_mss - base.tcp_mss == base.llh_len


def test_receive_window_defaults_to_mss():
    opts = Options()
    assert opts.receive_window == opts.tcp_mss
    larger = opts.with_overrides(buffer_size=1500)
    assert larger.receive_window == larger.tcp_mss


def test_receive_window_override():
    opts = Options().with_overrides(receive_window_size=32768)
    assert opts.receive_window == 32768


def test_with_overrides_leaves_original():
    base = Options()
    changed = base.with_overrides(ttl=10, udp=True)
    assert changed.ttl == 10
    assert changed.udp is True
    assert base.ttl == 64
    assert base.udp is False


def test_with_overrides_unknown_field():
    with pytest.raises(TypeError):
        Options().with_overrides(no_such_option=1)


def test_options_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Options().ttl = 1


def test_byte_order_coerced_from_int():
    opts = Options(byte_order=1234)
    assert opts.byte_order is ByteOrder.BIG_ENDIAN


def test_invalid_byte_order():
    with pytest.raises(ValueError):
        Options(byte_order=42)