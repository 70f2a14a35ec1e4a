"""A minimal threaded HTTP server that serves two HTML files."""

from __future__ import annotations

import argparse
import socketserver
import time
from collections.abc import Callable
from pathlib import Path

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7878
DEFAULT_HTML_DIR = "html"
SLEEP_SECONDS = 5

OK_STATUS = "HTTP/1.1 200 OK\r\n\r\n"
NOT_FOUND_STATUS = "HTTP/1.1 404 NOT FOUND\r\n\r\n"

_GET_ROOT = b"GET / HTTP/1.1\r\n"
_GET_SLEEP = b"GET /sleep HTTP/1.1\r\n"
_BUFFER_SIZE = 1024


def handle_request(
    request: bytes,
    html_dir: str | Path = DEFAULT_HTML_DIR,
    sleep: Callable[[float], None] = time.sleep,
) -> bytes:
    """Build the raw response for a raw request.

    ``/`` serves hello.html, ``/sleep`` serves it after a delay, anything else 404.html.
    """
    if request.startswith(_GET_ROOT):
        status, name = OK_STATUS, "hello.html"
    elif request.startswith(_GET_SLEEP):
        sleep(SLEEP_SECONDS)
        status, name = OK_STATUS, "hello.html"
    else:
        status, name = NOT_FOUND_STATUS, "404.html"
    contents = (Path(html_dir) / name).read_text(encoding="utf-8")
    return (status + contents).encode("utf-8")


class _ThreadedServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


def serve(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    html_dir: str | Path = DEFAULT_HTML_DIR,
) -> socketserver.ThreadingTCPServer:
    """Create a bound server that handles each connection in its own thread."""
    directory = Path(html_dir)

    class _Handler(socketserver.BaseRequestHandler):
        def handle(self) -> None:
            request = self.request.recv(_BUFFER_SIZE)
            self.request.sendall(handle_request(request, directory))

    return _ThreadedServer((host, port), _Handler)


def main(argv: list[str] | None = None) -> int:
    """Serve the HTML directory until interrupted."""
    parser = argparse.ArgumentParser(description="Serve hello.html and 404.html.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--html-dir", default=DEFAULT_HTML_DIR)
    args = parser.parse_args(argv)
    with serve(args.host, args.port, args.html_dir) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())