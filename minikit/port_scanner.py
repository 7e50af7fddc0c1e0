"""TCP connect scanner for a range of ports on one host."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable

DEFAULT_HOST = "127.0.0.1"
FIRST_PORT = 20
LAST_PORT = 100


def is_port_open(host: str = DEFAULT_HOST, port: int = FIRST_PORT, timeout: float | None = 0.5) -> bool:
    """Return True if a TCP connection to ``host:port`` succeeds."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.settimeout(timeout)
        try:
            return sock.connect_ex((host, port)) == 0
        except OSError:
            return False


def scan_ports(
    host: str = DEFAULT_HOST,
    ports: Iterable[int] = range(FIRST_PORT, LAST_PORT + 1),
    timeout: float | None = 0.5,
) -> list[int]:
    """Return the ports among ``ports`` that accept a TCP connection, in order."""
    return [port for port in ports if is_port_open(host, port, timeout)]


def main(argv: list[str] | None = None) -> int:
    """Scan a port range and print each open port."""
    parser = argparse.ArgumentParser(prog="port_scanner", description="Scan TCP ports.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--start", type=int, default=FIRST_PORT)
    parser.add_argument("--end", type=int, default=LAST_PORT)
    parser.add_argument("--timeout", type=float, default=0.5)
    args = parser.parse_args(argv)

    for port in range(args.start, args.end + 1):
        if is_port_open(args.host, port, args.timeout):
            print(f"[+] Port {port} is OPEN!")
    return 0


if __name__ == "__main__":
    sys.exit(main())