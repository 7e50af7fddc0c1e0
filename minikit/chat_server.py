"""TLS chat server that relays each client's messages to every other client."""

from __future__ import annotations

import argparse
import os
import socket
import ssl
import sys
import threading

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8888
BUFFER_SIZE = 1024
BACKLOG = 5
ACCEPT_POLL_SECONDS = 0.2


def create_server_context(certfile: str | os.PathLike[str], keyfile: str | os.PathLike[str]) -> ssl.SSLContext:
    """Build a server-side TLS context from a PEM certificate and private key."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(certfile, keyfile)
    return context


class ChatServer:
    """Accepts clients and broadcasts what each one sends to all the others.

    With ``context`` set, every accepted connection is wrapped in TLS;
    without it the server speaks plain TCP.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        context: ssl.SSLContext | None = None,
        backlog: int = BACKLOG,
    ) -> None:
        self._context = context
        self._clients: list[socket.socket] = []
        self._lock = threading.Lock()
        self._closed = threading.Event()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind((host, port))
            self._sock.listen(backlog)
        except OSError:
            self._sock.close()
            raise
        self._sock.settimeout(ACCEPT_POLL_SECONDS)

    @property
    def address(self) -> tuple[str, int]:
        """The host and port the server listens on."""
        host, port = self._sock.getsockname()[:2]
        return host, port

    @property
    def clients(self) -> list[socket.socket]:
        """A snapshot of the connected clients."""
        with self._lock:
            return list(self._clients)

    def add_client(self, conn: socket.socket) -> None:
        """Register a connection so that it receives broadcasts."""
        with self._lock:
            self._clients.append(conn)

    def remove_client(self, conn: socket.socket) -> None:
        """Stop broadcasting to ``conn``; unknown connections are ignored."""
        with self._lock:
            self._clients = [client for client in self._clients if client is not conn]

    def broadcast(self, data: bytes, sender: socket.socket | None = None) -> int:
        """Send ``data`` to every client except ``sender``; return how many got it."""
        delivered = 0
        with self._lock:
            for client in self._clients:
                if client is sender:
                    continue
                try:
                    client.sendall(data)
                except OSError:
                    continue
                delivered += 1
        return delivered

    def handle_client(self, conn: socket.socket) -> None:
        """Relay messages from ``conn`` until it disconnects, then drop it."""
        try:
            while True:
                try:
                    data = conn.recv(BUFFER_SIZE)
                except OSError:
                    data = b""
                if not data:
                    print("Client disconnected or error", file=sys.stderr)
                    break
                text = data.decode("utf-8", errors="replace")
                print(f"Received {len(data)} bytes: {text}", flush=True)
                self.broadcast(data, conn)
        finally:
            self.remove_client(conn)
            _close_connection(conn)

    def serve_forever(self) -> None:
        """Accept clients and start a handler thread for each until closed."""
        while not self._closed.is_set():
            try:
                conn, addr = self._sock.accept()
            except TimeoutError:
                continue
            except OSError:
                if self._closed.is_set():
                    break
                raise
            if self._context is not None:
                try:
                    conn = self._context.wrap_socket(conn, server_side=True)
                except OSError:
                    conn.close()
                    print("Failed to accept connection", file=sys.stderr)
                    continue
            print(f"New connection from {addr[0]}", flush=True)
            self.add_client(conn)
            threading.Thread(target=self.handle_client, args=(conn,), daemon=True).start()

    def close(self) -> None:
        """Stop accepting and disconnect every client."""
        self._closed.set()
        self._sock.close()
        with self._lock:
            clients, self._clients = self._clients, []
        for client in clients:
            _close_connection(client)

    def __enter__(self) -> ChatServer:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _close_connection(conn: socket.socket) -> None:
    try:
        conn.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    conn.close()


def main(argv: list[str] | None = None) -> int:
    """Run the chat server until interrupted."""
    parser = argparse.ArgumentParser(prog="chat_server", description="TLS chat server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--cert", default="cert.pem", help="PEM certificate file")
    parser.add_argument("--key", default="key.pem", help="PEM private key file")
    args = parser.parse_args(argv)

    print(f"Current working directory: {os.getcwd()}")
    try:
        context = create_server_context(args.cert, args.key)
    except (OSError, ssl.SSLError) as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        server = ChatServer(args.host, args.port, context)
    except OSError:
        print("Failed to bind socket", file=sys.stderr)
        return 1
    with server:
        print(f"Server listening on port {args.port}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())