"""Client side: chat messages and a BMP image's dominant colours."""

from __future__ import annotations

import argparse
import os
import socket
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .bmp import BmpError, analyse_bmp_image
from .colors import ColorCount

PORT = 8089
BUFFER_SIZE = 1024
MAX_COLORS = 10
MESSAGE_CODE = "message: "
COLORS_CODE = "couleurs: "
PROMPT = "Votre message (max 1000 caractères): "


def build_message(text: str) -> str:
    """Tag a line of user text as a chat message."""
    return f"{MESSAGE_CODE}{text}"


def colors_message(counts: Iterable[ColorCount]) -> str:
    """Build the colours message from counts sorted least frequent first.

    The header announces at most ten colours; the most frequent colours
    follow, never including the least frequent entry of the list.
    """
    counts = list(counts)
    announced = min(len(counts), MAX_COLORS)
    picked = counts[:0:-1][:MAX_COLORS]
    return ",".join([f"{COLORS_CODE}{announced}", *(e.color.hex() for e in picked)])


def exchange_message(sock: socket.socket, text: str) -> str:
    """Send one chat message and return the server's reply."""
    sock.sendall(build_message(text).encode("utf-8"))
    reply = sock.recv(BUFFER_SIZE)
    return reply.decode("utf-8", errors="replace")


def send_colors(sock: socket.socket, path: str | os.PathLike[str]) -> str:
    """Analyse a BMP image, send its dominant colours and return the message."""
    message = colors_message(analyse_bmp_image(path))
    sock.sendall(message.encode("ascii"))
    return message


def chat(sock: socket.socket, lines: Iterable[str]) -> Iterator[str]:
    """Send each line as a message, yielding the reply to each in turn."""
    for line in lines:
        yield exchange_message(sock, line)


def _prompted_lines(stream: TextIO) -> Iterator[str]:
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            return
        yield line


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmppalette-client",
        description=(
            "Without arguments, chat with the server; with a BMP image path, "
            "send its dominant colours; with more arguments, send one message."
        ),
    )
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("args", nargs="*", metavar="chemin_bmp_image")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Connect to the server and run the mode chosen by the arguments."""
    options = _parser().parse_args(argv)
    try:
        sock = socket.create_connection((options.host, options.port))
    except OSError as error:
        print(f"connection serveur: {error}", file=sys.stderr)
        return 1

    with sock:
        try:
            if not options.args:
                for reply in chat(sock, _prompted_lines(sys.stdin)):
                    print(f"Message reçu: {reply}")
            elif len(options.args) == 1:
                send_colors(sock, options.args[0])
            else:
                line = next(_prompted_lines(sys.stdin), "")
                print(f"Message reçu: {exchange_message(sock, line)}")
        except (OSError, BmpError) as error:
            print(f"erreur: {error}", file=sys.stderr)
            return 1
    return 0