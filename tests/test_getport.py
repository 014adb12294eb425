import pytest

from kindkit.common.getport import get_free_port, port_or_get_free_port


def test_valid_port_is_kept():
    assert port_or_get_free_port(80, "localhost") == 80


def test_no_port_picks_a_free_one():
    port = port_or_get_free_port(0, "localhost")
    assert 0 < port <= 65535


def test_minus_one_lets_backend_pick():
    assert port_or_get_free_port(-1, "localhost") == 0


@pytest.mark.parametrize("listen_addr", ["localhost", "127.0.0.1"])
def test_get_free_port_valid_addresses(listen_addr):
    port = get_free_port(listen_addr)
    assert 0 < port <= 65535


@pytest.mark.parametrize("listen_addr", ["88.88.88.0", "2112:beaf:beaf:2:3"])
def test_get_free_port_bad_addresses(listen_addr):
    with pytest.raises(OSError):
        get_free_port(listen_addr)