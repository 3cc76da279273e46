"""Server side: echo chat messages and draw received colours as a pie chart."""

from __future__ import annotations

import argparse
import math
import os
import socket
import subprocess
import sys
import threading
from pathlib import Path

PORT = 8089
BUFFER_SIZE = 1024
BACKLOG = 10
MAX_COLORS = 10
CODE_LENGTH = 9
MESSAGE_CODE = "message:"
SVG_FILE_PATH = "pie_chart.svg"
BROWSER = "firefox"

_CENTER_X = 200.0
_CENTER_Y = 200.0
_RADIUS = 150.0
_START_ANGLE = -90.0


def message_code(data: str) -> str:
    """Return the leading word of a message, at most nine characters long."""
    words = data.split(maxsplit=1)
    return words[0][:CODE_LENGTH] if words else ""


def _point(angle_degrees: float) -> tuple[float, float]:
    angle = math.radians(angle_degrees)
    return (
        _CENTER_X + _RADIUS * math.cos(angle),
        _CENTER_Y + _RADIUS * math.sin(angle),
    )


def pie_chart_svg(data: str) -> str:
    """Build an SVG pie chart from a colours message.

    The first comma-separated field is the message header; each field after
    it is a fill colour drawn as one tenth of the circle, clockwise from the
    top. Empty fields are skipped.
    """
    fields = [field for field in data.split(",") if field]
    colors = fields[1:]
    if len(colors) > MAX_COLORS:
        raise ValueError(f"at most {MAX_COLORS} colours can be drawn, got {len(colors)}")

    slice_angle = 360.0 / MAX_COLORS
    lines = [
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>',
        '<svg width="400" height="400" xmlns="http://www.w3.org/2000/svg">',
        '  <rect width="100%" height="100%" fill="#ffffff" />',
    ]
    start_angle = _START_ANGLE
    for color in colors:
        end_angle = start_angle + slice_angle
        x1, y1 = _point(start_angle)
        x2, y2 = _point(end_angle)
        lines.append(
            f'  <path d="M{x1:.2f},{y1:.2f} A{_RADIUS:.2f},{_RADIUS:.2f} 0 0,1 '
            f'{x2:.2f},{y2:.2f} L{_CENTER_X:.2f},{_CENTER_Y:.2f} Z" fill="{color}" />'
        )
        start_angle = end_angle
    lines.append("</svg>")
    return "".join(f"{line}\n" for line in lines)


def write_pie_chart(data: str, path: str | os.PathLike[str]) -> Path:
    """Write the pie chart of a colours message to ``path`` and return it."""
    target = Path(path)
    target.write_text(pie_chart_svg(data), encoding="utf-8")
    return target


def open_in_browser(path: str | os.PathLike[str], browser: str = BROWSER) -> bool:
    """Open a file in a browser; return whether the browser exited cleanly."""
    try:
        result = subprocess.run([browser, os.fspath(path)], check=False)
    except OSError:
        print("Failed to open the SVG file.")
        return False
    if result.returncode == 0:
        print(f"SVG file opened in {browser}.")
        return True
    print("Failed to open the SVG file.")
    return False


def handle_message(
    conn: socket.socket, data: str, svg_path: str | os.PathLike[str]
) -> Path | None:
    """Echo a chat message, or draw and show the colours of any other message.

    Returns the path of the chart written, or None for an echoed message.
    """
    print(f"Message reçu: {data}")
    if message_code(data) == MESSAGE_CODE:
        conn.sendall(data.encode("utf-8"))
        return None
    chart = write_pie_chart(data, svg_path)
    open_in_browser(chart)
    return chart


def handle_client(conn: socket.socket, svg_path: str | os.PathLike[str]) -> None:
    """Serve one client until it disconnects, then close its socket."""
    with conn:
        while True:
            try:
                chunk = conn.recv(BUFFER_SIZE)
            except OSError as error:
                print(f"Erreur de réception: {error}", file=sys.stderr)
                return
            if not chunk:
                print("Client déconnecté.")
                return
            handle_message(conn, chunk.decode("utf-8", errors="replace"), svg_path)


def serve(
    host: str = "",
    port: int = PORT,
    svg_path: str | os.PathLike[str] = SVG_FILE_PATH,
) -> None:
    """Accept clients forever, each served on its own thread, until Ctrl+C."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(BACKLOG)
        print("Serveur en attente de connexions...")
        try:
            while True:
                try:
                    conn, _ = listener.accept()
                except OSError as error:
                    print(f"accept: {error}", file=sys.stderr)
                    continue
                threading.Thread(
                    target=handle_client, args=(conn, svg_path), daemon=True
                ).start()
        except KeyboardInterrupt:
            print("\nSignal Ctrl+C capturé. Sortie du programme.")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmppalette-server",
        description="Echo chat messages and draw received colours as a pie chart.",
    )
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--svg", default=SVG_FILE_PATH, help="where to write the chart")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the server with the options given on the command line."""
    options = _parser().parse_args(argv)
    try:
        serve(options.host, options.port, options.svg)
    except OSError as error:
        print(f"bind: {error}", file=sys.stderr)
        return 1
    return 0