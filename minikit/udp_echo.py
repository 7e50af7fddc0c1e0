"""UDP echo server and client."""

from __future__ import annotations

import argparse
import socket
import sys

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888
BUFFER_SIZE = 1024
MAX_DATAGRAM = BUFFER_SIZE - 1
DEFAULT_MESSAGE = "Hello world!"

Address = tuple[str, int]


def create_server_socket(host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> socket.socket:
    """Create a UDP socket bound to ``host:port``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def echo_once(sock: socket.socket) -> tuple[bytes, Address]:
    """Receive one datagram, send it back to its sender and return it with the sender."""
    data, addr = sock.recvfrom(MAX_DATAGRAM)
    sock.sendto(data, addr)
    return data, addr


def serve(sock: socket.socket, max_messages: int | None = None) -> int:
    """Echo datagrams until ``max_messages`` have been handled; return the count."""
    handled = 0
    while max_messages is None or handled < max_messages:
        try:
            data, _ = echo_once(sock)
        except OSError:
            if sock.fileno() == -1:
                break
            print("Failed to receive data", file=sys.stderr)
            continue
        print(f"Received: {data.decode('utf-8', errors='replace')}")
        handled += 1
    return handled


def _client_socket(timeout: float | None) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.settimeout(timeout)
    return sock


def _receive_reply(sock: socket.socket) -> str:
    data, _ = sock.recvfrom(MAX_DATAGRAM)
    return data.decode("utf-8", errors="replace")


def send_and_receive(
    message: str = DEFAULT_MESSAGE,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    timeout: float | None = None,
) -> str:
    """Send ``message`` to the echo server and return its reply."""
    with _client_socket(timeout) as sock:
        sock.sendto(message.encode("utf-8"), (host, port))
        return _receive_reply(sock)


def server_main(argv: list[str] | None = None) -> int:
    """Run the echo server until interrupted."""
    parser = argparse.ArgumentParser(prog="udp_server", description="UDP echo server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        sock = create_server_socket(args.host, args.port)
    except OSError:
        print("Bind failed", file=sys.stderr)
        return 1
    with sock:
        print(f"UDP Echo Server is running on port {args.port}...", flush=True)
        try:
            serve(sock)
        except KeyboardInterrupt:
            pass
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Send one message to the echo server and print the reply."""
    parser = argparse.ArgumentParser(prog="udp_client", description="UDP echo client.")
    parser.add_argument("message", nargs="?", default=DEFAULT_MESSAGE)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--timeout", type=float, default=None)
    args = parser.parse_args(argv)

    with _client_socket(args.timeout) as sock:
        try:
            sock.sendto(args.message.encode("utf-8"), (args.host, args.port))
        except OSError as exc:
            print(f"sendto failed: {exc}", file=sys.stderr)
            return 1
        print("Message sent to server.")
        try:
            reply = _receive_reply(sock)
        except OSError as exc:
            print(f"recvfrom failed: {exc}", file=sys.stderr)
            return 0
        print(f"Server reply: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(server_main())