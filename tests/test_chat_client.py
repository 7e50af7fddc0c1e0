import io
import socket
import ssl
import threading

from minikit.chat_client import (
    create_client_context,
    format_message,
    outgoing_messages,
    receive_messages,
    run_client,
)


def test_format_message():
    assert format_message("alice", "hi") == "alice: hi"


def test_outgoing_messages_skips_blank_and_stops_at_exit():
    lines = ["a\n", "\n", "b\n", "exit\n", "c\n"]
    assert list(outgoing_messages("u", lines)) == [
        format_message("u", "a"),
        format_message("u", "b"),
    ]


def test_outgoing_messages_without_exit_uses_all_lines():
    lines = ["one\n", "two"]
    assert list(outgoing_messages("u", lines)) == [
        format_message("u", "one"),
        format_message("u", "two"),
    ]


def test_receive_messages_writes_until_closed():
    left, right = socket.socketpair()
    left.sendall(b"hello")
    left.close()
    out = io.StringIO()
    assert receive_messages(right, out) == 1
    assert out.getvalue() == "hello\n"
    right.close()


def test_create_client_context_skips_verification():
    context = create_client_context()
    assert context.verify_mode == ssl.CERT_NONE
    assert context.check_hostname is False


def test_run_client_sends_formatted_messages():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)
    host, port = listener.getsockname()
    received = bytearray()

    def accept_and_read():
        conn, _ = listener.accept()
        conn.settimeout(5)
        with conn:
            while chunk := conn.recv(1024):
                received.extend(chunk)

    thread = threading.Thread(target=accept_and_read)
    thread.start()
    sent = run_client("bob", ["hello\n", "\n", "world\n", "exit\n", "ignored\n"], host, port)
    thread.join(5)
    listener.close()
    assert sent == 2
    expected = format_message("bob", "hello") + format_message("bob", "world")
    assert bytes(received) == expected.encode("utf-8")