import pytest

from linproc.net_ip import NetSocket, decode_ipv4, decode_ipv6, parse_net_socket


def test_ipv4_remote():
    assert decode_ipv4("00000000:0050") == "0.0.0.0:80"


def test_ipv4_local():
    assert decode_ipv4("0100007F:1F90") == "127.0.0.1:8080"


def test_ipv4_lowercase_hex():
    assert decode_ipv4("0100007f:1f90") == "127.0.0.1:8080"


def test_ipv6_remote():
    assert decode_ipv6("350E012A900F122E85EDEAADA64DAAD1:0016") == "2a01:e35:2e12:f90:adea:ed85:d1aa:4da6:22"


def test_ipv6_local():
    assert decode_ipv6("00000000000000000000000001000000:2328") == "::1:9000"


def test_ipv6_all_zero():
    assert decode_ipv6("00000000000000000000000000000000:0000") == ":::0"


def test_ipv6_mapped_ipv4_printed_dotted():
    assert decode_ipv6("0000000000000000FFFF00000100007F:0050") == "127.0.0.1:80"


@pytest.mark.parametrize("value", ["0100007F", "0100007F:1F9", "0100007G:1F90", "0100007F:1F90 "])
def test_ipv4_invalid(value):
    with pytest.raises(ValueError, match="Cannot decode ipv4 address"):
        decode_ipv4(value)


@pytest.mark.parametrize("value", ["0100007F:1F90", "0000000000000000000000000100000:2328"])
def test_ipv6_invalid(value):
    with pytest.raises(ValueError, match="Cannot decode ipv6 address"):
        decode_ipv6(value)


def test_parse_net_socket():
    fields = (
        "3: 1507000A:0016 0BFB000A:D020 01 00000060:00000002 02:00000017 00000000 "
        "1000 0 582338 4 0000000000000000"
    ).split()
    assert parse_net_socket(fields, decode_ipv4) == NetSocket(
        local_address="10.0.7.21:22",
        remote_address="10.0.251.11:53280",
        status=1,
        tx_queue=96,
        rx_queue=2,
        uid=1000,
        inode=582338,
        ref_count=4,
    )


def test_parse_net_socket_too_short():
    with pytest.raises(ValueError, match="Cannot parse net socket line"):
        parse_net_socket(["0:", "0100007F:0035"], decode_ipv4)


def test_parse_net_socket_bad_queues():
    fields = "0: 0100007F:0035 00000000:0000 07 0000000000000000 00:00000000 00000000 0 0 1 2".split()
    with pytest.raises(ValueError, match="Cannot parse tx/rx queues"):
        parse_net_socket(fields, decode_ipv4)


def test_parse_net_socket_status_out_of_range():
    fields = "0: 0100007F:0035 00000000:0000 1FF 00000000:00000000 00:00000000 00000000 0 0 1 2".split()
    with pytest.raises(ValueError):
        parse_net_socket(fields, decode_ipv4)