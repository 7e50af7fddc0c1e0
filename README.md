# minikit

A handful of small programs in one package:

- an integer calculator for the terminal
- a file encryptor built on secret-key authenticated encryption
- a TCP port scanner
- a UDP echo server and client
- a TLS chat server and client
- a thread pool with a blocking task queue
- a tic-tac-toe game
- a space shooter game

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The two games open a window through pygame and need a display.

## Commands

### `minikit-calculator`

Reads two integers and an operator (`+`, `-`, `*`, `/`) from standard input
and prints the result. Division truncates toward zero. Division by zero and an
unknown operator are reported on the output; missing or non-integer numbers end
the program with exit status 1.

### `minikit-encryptor`

```
minikit-encryptor [--key-file PATH] genkey
minikit-encryptor [--key-file PATH] encrypt INPUT OUTPUT
minikit-encryptor [--key-file PATH] decrypt INPUT OUTPUT
```

`genkey` writes a random 32-byte key to the key file (default `key.bin`).
`encrypt` writes a random nonce followed by the authenticated ciphertext;
`decrypt` reverses it. A missing key file, an unreadable input, or a
ciphertext that is too short or fails authentication is reported on standard
error with exit status 1.

### `minikit-port-scanner`

```
minikit-port-scanner [--host HOST] [--start N] [--end N] [--timeout SECONDS]
```

Tries a TCP connection to each port from `--start` to `--end` inclusive
(defaults 20 to 100 on `127.0.0.1`, 0.5 s timeout) and prints
`[+] Port N is OPEN!` for each one that accepts.

### `minikit-udp-server` and `minikit-udp-client`

```
minikit-udp-server [--host HOST] [--port PORT]
minikit-udp-client [MESSAGE] [--host HOST] [--port PORT] [--timeout SECONDS]
```

The server binds to `0.0.0.0:8888` by default, prints each datagram it
receives and sends it back to the sender, until interrupted. The client sends
`MESSAGE` (default `Hello world!`) to `127.0.0.1:8888` and prints the reply.
Without `--timeout` the client waits for the reply indefinitely.

### `minikit-chat-server` and `minikit-chat-client`

```
minikit-chat-server [--host HOST] [--port PORT] [--cert FILE] [--key FILE]
minikit-chat-client [--host HOST] [--port PORT] [--username NAME]
```

The server listens on port 8888 over TLS, using the PEM certificate and
private key given by `--cert` and `--key` (defaults `cert.pem` and `key.pem`
in the current directory), and relays every message it receives to all other
connected clients.

The client asks for a username unless `--username` is given, connects over TLS
and prints incoming messages. Each non-empty line typed is sent as
`username: message`; typing `exit` or ending input leaves. The client does not
verify the server's certificate.

### `minikit-tictactoe`

```
minikit-tictactoe [--font PATH]
```

Two players take turns, X first, clicking cells of a 3x3 grid. A line above
the board announces a win or a draw; press `R` afterwards to start again.
`--font` selects a TrueType font; pygame's default font is used otherwise.

### `minikit-spaceship`

```
minikit-spaceship [--resources DIR]
```

Move with the arrow keys or WASD and shoot with Space (one shot every half
second). An enemy appears every three seconds, drifting down and bouncing off
the sides; each one that reaches the bottom costs one of three health points.
At zero health the screen shows `GAME OVER` until the window is closed.
`DIR` (default `resources`) may hold `spaceship.png`, `enemy.png` and
`Arial.ttf`; missing images are drawn as coloured squares and a missing font
falls back to pygame's default.

## Using the library

```python
from minikit.calculator import calculate, CalculatorError
from minikit.encryptor import generate_key, encrypt_file, decrypt_file, EncryptorError
from minikit.port_scanner import scan_ports
from minikit.threadpool import ThreadPool
from minikit.tictactoe_board import Board

calculate(7, 2, "/")                     # 3

generate_key("key.bin")
encrypt_file("notes.txt", "notes.enc", "key.bin")
decrypt_file("notes.enc", "notes.out", "key.bin")

open_ports = scan_ports("127.0.0.1", range(20, 101), 0.2)

with ThreadPool(4) as pool:              # leaving the block runs queued tasks, then joins
    pool.submit(lambda: print("running on a worker"))

board = Board()
board.handle_click(250, 250)             # places "X" in the centre cell and returns it
board.check_win("X")                     # False
```

Other pieces:

- `minikit.udp_echo`: `create_server_socket`, `echo_once`, `serve`,
  `send_and_receive`.
- `minikit.chat_server`: `ChatServer` (plain TCP when no TLS context is
  given, TLS otherwise) and `create_server_context`.
- `minikit.chat_client`: `format_message`, `outgoing_messages`,
  `receive_messages`, `create_client_context`, `run_client`.
- `minikit.tictactoe_game.status_message` gives the end-of-game text for a
  board.
- `minikit.spaceship_entities` holds the shooter's `Player`, `Bullet`, `Enemy`,
  `EnemyManager`, `Controls` and `Rect`; `minikit.spaceship_game.step`
  advances one frame without a window.

Errors are raised as exceptions: `CalculatorError` for division by zero or an
unknown operator, `EncryptorError` for a missing or short key file, unreadable
input, unwritable output or ciphertext that fails authentication, and
`RuntimeError` when submitting to a `ThreadPool` that has been shut down.

## What it does not do

The chat keeps no history and has no accounts: messages go only to clients
connected at that moment. Tic-tac-toe is for two people at one screen, with no
computer opponent. The space shooter keeps no score.