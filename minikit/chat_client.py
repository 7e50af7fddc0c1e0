"""TLS chat client: sends typed lines and prints what others say."""

from __future__ import annotations

import argparse
import socket
import ssl
import sys
import threading
from collections.abc import Iterable, Iterator
from typing import TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888
BUFFER_SIZE = 1024
EXIT_COMMAND = "exit"


def format_message(username: str, message: str) -> str:
    """Prefix ``message`` with the sender's name."""
    return f"{username}: {message}"


def outgoing_messages(username: str, lines: Iterable[str]) -> Iterator[str]:
    """Yield formatted messages for ``lines``, skipping blanks and stopping at ``exit``."""
    for line in lines:
        message = line.rstrip("\r\n")
        if message == EXIT_COMMAND:
            return
        if not message:
            continue
        yield format_message(username, message)


def receive_messages(conn: socket.socket, output: TextIO) -> int:
    """Write each message received on ``conn`` to ``output`` until it closes.

    Returns the number of messages received.
    """
    received = 0
    while True:
        try:
            data = conn.recv(BUFFER_SIZE)
        except OSError:
            data = b""
        if not data:
            print("Server disconnected or error", file=sys.stderr)
            return received
        output.write(data.decode("utf-8", errors="replace") + "\n")
        output.flush()
        received += 1


def create_client_context() -> ssl.SSLContext:
    """Build a client TLS context that, like the server's peers, skips certificate checks."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def run_client(
    username: str,
    lines: Iterable[str],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    context: ssl.SSLContext | None = None,
) -> int:
    """Connect, relay ``lines`` as chat messages and return how many were sent."""
    conn = socket.create_connection((host, port))
    if context is not None:
        try:
            conn = context.wrap_socket(conn, server_hostname=host)
        except OSError:
            conn.close()
            raise
    print("Connected to server!", flush=True)
    receiver = threading.Thread(
        target=receive_messages, args=(conn, sys.stdout), daemon=True
    )
    receiver.start()
    sent = 0
    try:
        for message in outgoing_messages(username, lines):
            conn.sendall(message.encode("utf-8"))
            sent += 1
    finally:
        try:
            conn.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        conn.close()
        receiver.join(timeout=1)
    return sent


def main(argv: list[str] | None = None) -> int:
    """Ask for a username, then chat until ``exit`` or end of input."""
    parser = argparse.ArgumentParser(prog="chat_client", description="TLS chat client.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--username", default=None)
    args = parser.parse_args(argv)

    username = args.username
    if username is None:
        print("Enter your username: ", end="", flush=True)
        username = sys.stdin.readline().rstrip("\r\n")
    try:
        run_client(username, sys.stdin, args.host, args.port, create_client_context())
    except ssl.SSLError as exc:
        print(f"TLS handshake failed: {exc}", file=sys.stderr)
        return 1
    except OSError:
        print("Failed to connect to server", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())