"""A tiny HTTP server with two plain-text GET routes."""

from __future__ import annotations

import argparse
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7878

ROUTES = {
    "/": "Hello, World!",
    "/foo": "Hi from `GET /foo`",
}
_ALLOWED_METHODS = ("GET", "HEAD")


def respond(method: str, path: str) -> tuple[int, str]:
    """Return the status code and body for ``method`` on ``path``."""
    body = ROUTES.get(path)
    if body is None:
        return 404, ""
    if method not in _ALLOWED_METHODS:
        return 405, ""
    return 200, body


class _Handler(BaseHTTPRequestHandler):
    def _reply(self) -> None:
        status, body = respond(self.command, urlsplit(self.path).path)
        payload = body.encode("utf-8")
        self.send_response(status)
        if status == 405:
            self.send_header("Allow", ",".join(_ALLOWED_METHODS))
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(payload)

    do_GET = _reply
    do_HEAD = _reply
    do_POST = _reply
    do_PUT = _reply
    do_DELETE = _reply
    do_PATCH = _reply
    do_OPTIONS = _reply


def make_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Create a bound HTTP server for the routes."""
    return ThreadingHTTPServer((host, port), _Handler)


def main(argv: list[str] | None = None) -> int:
    """Serve the routes until interrupted."""
    parser = argparse.ArgumentParser(description="Serve two hello routes.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    with make_server(args.host, args.port) as server:
        print(f"listening on {args.host}:{args.port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())