[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minikit"
version = "0.1.0"
description = "Small programs: an integer calculator, a file encryptor, networking tools, a thread pool, tic-tac-toe and a space shooter"
requires-python = ">=3.10"
dependencies = [
    "pynacl",
    "pygame",
]
keywords = [
    "calculator",
    "encryption",
    "port-scanner",
    "udp",
    "echo",
    "chat",
    "tls",
    "thread-pool",
    "tic-tac-toe",
    "shooter",
    "game",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Security :: Cryptography",
    "Topic :: Communications :: Chat",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minikit-calculator = "minikit.calculator:main"
minikit-encryptor = "minikit.encryptor:main"
minikit-port-scanner = "minikit.port_scanner:main"
minikit-udp-server = "minikit.udp_echo:server_main"
minikit-udp-client = "minikit.udp_echo:client_main"
minikit-chat-server = "minikit.chat_server:main"
minikit-chat-client = "minikit.chat_client:main"
minikit-tictactoe = "minikit.tictactoe_game:main"
minikit-spaceship = "minikit.spaceship_game:main"

[tool.hatch.build.targets.wheel]
packages = ["minikit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
