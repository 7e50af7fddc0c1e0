import socket

import pytest

from minikit.port_scanner import is_port_open, main, scan_ports


@pytest.fixture
def listening_port():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(5)
    yield server.getsockname()[1]
    server.close()


@pytest.fixture
def closed_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def test_open_port_detected(listening_port):
    assert is_port_open("127.0.0.1", listening_port, 1.0) is True


def test_closed_port_detected(closed_port):
    assert is_port_open("127.0.0.1", closed_port, 1.0) is False


def test_scan_returns_only_open_ports(listening_port, closed_port):
    result = scan_ports("127.0.0.1", [closed_port, listening_port], 1.0)
    assert result == [listening_port]


def test_scan_empty_range():
    assert scan_ports("127.0.0.1", [], 1.0) == []


def test_main_prints_open_port(listening_port, capsys):
    code = main(["--start", str(listening_port), "--end", str(listening_port), "--timeout", "1"])
    assert code == 0
    assert capsys.readouterr().out == f"[+] Port {listening_port} is OPEN!\n"


def test_main_prints_nothing_for_closed_port(closed_port, capsys):
    assert main(["--start", str(closed_port), "--end", str(closed_port)]) == 0
    assert capsys.readouterr().out == ""